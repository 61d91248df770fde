"""Pipeline steps. Each step takes a StepContext and returns a StepOutcome."""
