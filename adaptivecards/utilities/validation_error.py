class ValidationError(Exception):
    """Exception raised when a card document cannot be parsed at all.
    NOTE: Problems with individual nodes never raise. They are recorded as ParseEvents on the SerializationContext. """
    
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)
