class ConfigError(RuntimeError):
    pass


class ProtocolError(RuntimeError):
    """The model returned something this program does not know how to handle."""


class UnknownCapabilityError(ProtocolError):
    pass


class UnknownToolError(ProtocolError):
    pass


class UnknownDataTagError(ProtocolError):
    pass
