class StorageError(Exception):
    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message if path is None else f"{message}: {path}")
