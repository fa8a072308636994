class DocumentError(Exception):
    pass


class ReadOnlyDocumentError(DocumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Document '{name}' is read-only.")
