"""
Exceptions raised while reading CoNLL data and checking dependency trees.
"""

import networkx as nx


class CoNLLError(ValueError):
    """ Base class of the errors in the format of CoNLL data """


class InvalidLine(CoNLLError):
    """ A line that cannot be read: unknown shape, wrong number of fields
        or invalid field content """

    def __init__(self, line_index, line, reason=None):
        self.line_index = line_index
        self.line = line
        self.reason = reason
        message = "Invalid line {}: {!r}".format(line_index, line)
        if reason:
            message = "{}\n{}".format(message, reason)
        super(InvalidLine, self).__init__(message)


class InvalidToken(CoNLLError):
    """ Base class of the violations of the token invariants """

    def __init__(self, line_number, reason=None):
        self.line_number = line_number
        message = "Line {}".format(line_number)
        if reason:
            message = "{}: {}".format(message, reason)
        super(InvalidToken, self).__init__(message)


class InvalidTokenId(InvalidToken):
    pass


class InvalidTokenHead(InvalidToken):
    pass


class InvalidTokenForm(InvalidToken):
    pass


class InvalidTokenPOS(InvalidToken):
    pass


class MissingHeads(CoNLLError):
    """ A tree query on a sentence whose heads are not all annotated """


class InvalidTree(nx.NetworkXException):
    """ The heads of a sentence do not form a valid dependency tree """
