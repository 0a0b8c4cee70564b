class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class ParseError(DiagramError):
    pass


class LayoutOverflowError(DiagramError):
    pass
