"""Errors raised by the column schema services."""


class SchemaError(ValueError):
    pass


class DuplicateStandardFieldError(SchemaError):
    def __init__(self, project_id: str, standard_field: str):
        self.project_id = project_id
        self.standard_field = standard_field
        super().__init__(f"Project '{project_id}' already has an active '{standard_field}' column")


class ProtectedColumnError(SchemaError):
    def __init__(self, column_id: str, standard_field: str):
        self.column_id = column_id
        self.standard_field = standard_field
        super().__init__(
            f"Column '{column_id}' is the standard '{standard_field}' column and cannot be deleted, hide it instead"
        )


class InvalidColumnTypeChangeError(SchemaError):
    def __init__(self, column_id: str, current: str, requested: str):
        self.column_id = column_id
        self.current = current
        self.requested = requested
        super().__init__(f"Column '{column_id}' is already saved as '{current}', cannot change it to '{requested}'")


class InvalidValueError(SchemaError):
    pass


class DraftCommittedError(SchemaError):
    pass


class ProjectNotFoundError(SchemaError):
    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project '{project_id}' not found")
