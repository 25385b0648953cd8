# Note: a gui can set logging_function to redirect all messages to
# its own output widget.
class Print_class:
    '''
    Console printer. Supports redirection when wanted, but otherwise
    acts like a normal print.

    Attributes:
    * logging_function
      - Optional function which will be called by Print instead of
        sending to the console. The function should accept
        one argument, the message string.
    * verbose
      - Bool, if False then calls flagged as verbose are dropped.
    '''
    def __init__(self):
        self.logging_function = None
        self.verbose = True

    def __call__(self, line = '', verbose = False):
        '''
        Write a line to the console.
        Lines flagged verbose are skipped when verbose output is off.
        '''
        if verbose and not self.verbose:
            return
        # If there is a logging_function attached, call it.
        if self.logging_function != None:
            self.logging_function(line)
        else:
            print(line)
        return

# Static print object.
Print = Print_class()
