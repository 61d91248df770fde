"""jeez - interactive full-stack project scaffolder."""
