"""
Custom Exception classes for better and clearer error handling.
"""


class FfmpegNotFoundError(Exception):
    """
    Exception raised when no usable ffmpeg binary can be located.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class TranscodeError(Exception):
    """
    Exception raised when ffmpeg exits with a non-zero status.
    """

    def __init__(self, message: str, input_path=None, output_path=None):
        super().__init__(message)
        self.message = message
        self.input_path = input_path
        self.output_path = output_path

    def __str__(self):
        return self.message
