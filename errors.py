class ContractError(AssertionError):
    """A caller broke a precondition. Not meant to be recovered from."""


def require(condition, message):
    if not condition:
        raise ContractError(message)
