class SetupError(Exception):
    """Exception raised when a registry is configured from invalid card object classes."""
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
