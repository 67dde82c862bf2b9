class InputFileError(Exception):
    """
    raised when an input file cannot be read, parsed, or does not match the expected format

    Attributes:
        filename: the file which could not be used
        line_number: the line (1-based) of the offending content, if known
    """

    def __init__(self, msg, filename=None, line_number=None):
        self.filename = filename
        self.line_number = line_number
        location = ''
        if filename is not None:
            location = str(filename)
            if line_number is not None:
                location += ':{}'.format(line_number)
            location += ': '
        super().__init__(location + msg)


class MissingLengthError(KeyError):
    """
    raised when an alignment record refers to a sequence name absent from the target or query length table
    """

    def __init__(self, table, name):
        self.table = table
        self.name = name
        super().__init__('{} length table has no entry for {}'.format(table, repr(name)))

    def __str__(self):
        return self.args[0]
