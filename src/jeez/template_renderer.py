"""Render the Jinja2 templates for generated project files."""

import importlib.resources

import jinja2


def render_template(template_name: str, **kwargs) -> str:
    """Load a template from the jeez.templates package and render it.

    Args:
        template_name: Template filename (e.g. "docker-compose.yml.j2")
        **kwargs: Template variables.

    Returns:
        The rendered file content, trailing newline preserved.
    """
    templates = importlib.resources.files("jeez.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
