class InvalidDocumentIdError(ValueError):
    """Raised when a path identifier is not a valid 24-character hex ObjectId."""
    def __init__(self, document_id, message=None):
        self.document_id = document_id
        self.message = message or f"'{document_id}' is not a valid document id"
        super().__init__(self.message)
