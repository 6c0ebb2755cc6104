class InvariantViolation(AssertionError):
    def __init__(self, error_message: str, key=None):
        super().__init__(error_message)
        self.key = key
