"""Exceptions raised by the number wall engine.

Malformed player answers are never exceptions; they come back as False
verdicts. These cover misuse of the round engine and bad settings input.
"""


class NumberWallError(Exception):
    pass


class RoundStateError(NumberWallError, RuntimeError):
    def __init__(self, action: str, state):
        self.action = action
        self.state = state
        super().__init__(f"cannot {action} while round is {getattr(state, 'value', state)}")


class CeilingError(NumberWallError, ValueError):
    def __init__(self, reason: str, message: str):
        self.reason = reason
        self.message = message
        super().__init__(message)
