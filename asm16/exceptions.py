class AssemblerException(Exception):
    pass


class FileException(AssemblerException):
    VERB = "access"

    def __init__(self, path):
        self.path = path
        super().__init__(path)

    def __str__(self):
        return f"unable to {self.VERB} {self.path}"


class FileOpenException(FileException):
    VERB = "open"


class FileReadException(FileException):
    VERB = "read"


class FileWriteException(FileException):
    VERB = "write"


class LineException(AssemblerException):
    """Base for every error tied to a (0-based) source line."""

    def __init__(self, line_number, text):
        self.line_number = line_number
        self.text = text
        super().__init__(line_number, text)


class LineSyntaxException(LineException):
    def __str__(self):
        return f"syntax error at line {self.line_number}: {self.text}"


class InvalidInstructionException(LineException):
    def __str__(self):
        return f"invalid instruction \"{self.text}\" at line {self.line_number}"


class MissingOperandException(LineException):
    def __str__(self):
        return f"missing operand \"{self.text}\" at line {self.line_number}"


class TooManyOperandsException(LineException):
    def __str__(self):
        return f"too many operands (\"{self.text}\") at line {self.line_number}"


class InvalidRegisterException(LineException):
    def __str__(self):
        return f"invalid register \"{self.text}\" at line {self.line_number}"


class InvalidIntegerLiteralException(LineException):
    def __str__(self):
        return f"invalid integer literal \"{self.text}\" at line {self.line_number}"


class InvalidConditionException(LineException):
    def __str__(self):
        return f"invalid condition \"{self.text}\" at line {self.line_number}"


class DuplicateLabelException(LineException):
    def __str__(self):
        return f"duplicate label \"{self.text}\" at line {self.line_number}"


class UndefinedLabelException(AssemblerException):
    def __init__(self, label, line_number):
        self.label = label
        self.line_number = line_number
        super().__init__(label, line_number)

    def __str__(self):
        return f"usage of undefined label \"{self.label}\" at line {self.line_number}"


class AddressSpaceExhaustedException(AssemblerException):
    def __str__(self):
        return "address space exhausted"
