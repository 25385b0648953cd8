'''
Container for exception messages, and the warning record produced
by lenient descriptor reads.
'''

class Config_Parse_Exception(Exception):
    '''
    Exception raised when a descriptor xml cannot be read: syntax errors,
    truncated documents, missing required attributes, unparsable numbers,
    or any tolerated problem when reading in strict mode.

    Attributes:
    * attribute
      - String, name of the attribute at fault, or None.
    * tag
      - String, tag of the node being read when the problem was found,
        or None.
    '''
    def __init__(self, message, attribute = None, tag = None):
        super().__init__(message)
        self.attribute = attribute
        self.tag = tag
        return


class Config_Write_Exception(Exception):
    '''
    Exception raised when a descriptor xml cannot be encoded or written
    to its destination. The underlying error is chained as __cause__.
    '''


class Config_Parse_Warning:
    '''
    Record of a problem tolerated while reading a descriptor, eg. a
    param node with no owning function or event.

    Attributes:
    * message
      - String, description of the problem.
    * tag
      - String, tag of the node which triggered the warning.
    * line
      - Int, source line of the node, or None if unknown.
    '''
    def __init__(self, message, tag = None, line = None):
        self.message = message
        self.tag = tag
        self.line = line
        return

    def __str__(self):
        if self.line != None:
            return 'line {}: {}'.format(self.line, self.message)
        return self.message

    def __repr__(self):
        return 'Config_Parse_Warning({!r})'.format(str(self))
