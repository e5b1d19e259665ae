"""Errors raised by the tower game services.

Every error carries a stable numeric ``code`` and the HTTP status the API
layer answers with, so routes can render them without knowing the type.
"""


class GameError(Exception):
    code = 1000
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'code': self.code, 'message': self.message}


class InvalidRequestError(GameError):
    code = 1000
    http_status = 400


class WordAlreadyUsedError(GameError):
    code = 1001
    http_status = 400

    def __init__(self, word_id: int):
        super().__init__(f"Word ID {word_id} already used")
        self.word_id = word_id


class UnknownWordError(GameError):
    code = 1002
    http_status = 400

    def __init__(self, word_id: int):
        super().__init__(f"Word with ID {word_id} not found")
        self.word_id = word_id


class NoShufflesLeftError(GameError):
    code = 2001
    http_status = 403

    def __init__(self):
        super().__init__("No shuffles left")


class WordResolutionError(GameError):
    code = 2002
    http_status = 502

    def __init__(self, text: str):
        super().__init__(f"word not found with string: {text}")
        self.text = text


class UpstreamUnavailableError(GameError):
    code = 3001
    http_status = 502
