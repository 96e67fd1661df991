from .naming import pascal_case, python_identifier, snake_case
