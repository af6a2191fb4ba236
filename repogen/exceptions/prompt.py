from repogen.exceptions.core import RepogenError


class PromptError(RepogenError):
    """Interactive input could not be read (e.g. stdin was closed)."""

    log_category = 'prompt_failed'
