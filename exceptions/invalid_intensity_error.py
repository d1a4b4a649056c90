class InvalidIntensityError(ValueError):
    def __init__(self, intensity: int):
        self.intensity = intensity
        super().__init__("Intensity must be between 1 and 10")
