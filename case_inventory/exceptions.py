class InventoryError(Exception):
    """Base class for every error raised by the catalog."""


class IngestionError(InventoryError):
    """A source file could not be turned into rows."""


class UnsupportedFormatError(IngestionError):
    def __init__(self, file_name: str, allowed: tuple[str, ...]):
        self.file_name = file_name
        super().__init__(
            f"Unsupported file format: {file_name}. Use {', '.join(allowed)}."
        )


class EmptySourceError(IngestionError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"The spreadsheet is empty: {file_name}")


class UnreadableSourceError(IngestionError):
    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        super().__init__(f"Could not read the spreadsheet {file_name}: {reason}")


class MissingModelError(InventoryError):
    def __init__(self):
        super().__init__("The 'model' field is required for a catalog entry.")


class ItemNotFoundError(InventoryError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"No catalog entry with id {item_id}.")
