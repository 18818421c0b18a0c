"""Errors raised while turning an uploaded file into résumé text."""


class ExtractionError(Exception):
    """Base error; `message` is safe to show to the user."""

    default_message = "The file could not be read."

    def __init__(self, message: str = "", filename: str = ""):
        self.message = message or self.default_message
        self.filename = filename
        super().__init__(self.message)


class EmptyFileError(ExtractionError):
    default_message = "The file is empty or damaged."


class FileTooLargeError(ExtractionError):
    default_message = "The file is too large."


class UnsupportedFormatError(ExtractionError):
    default_message = "Unsupported file format. Only PDF (.pdf) and Word (.docx) files are supported."


class EncryptedFileError(ExtractionError):
    default_message = "The file is encrypted. Please upload an unencrypted copy."


class CorruptedFileError(ExtractionError):
    default_message = "The file is damaged. Try saving it again before uploading."


class InsufficientContentError(ExtractionError):
    default_message = "No usable text could be extracted. Check the file or try another format."


class NotAResumeError(ExtractionError):
    default_message = "The file does not look like a résumé."
