'''
Change Log:
 * 0.1
   - Initial version: descriptor xml reader and writer split out
     of the gui tool.
 * 0.2
   - Reader rebuilt as a streaming state machine; params attach to the
     function or event currently open instead of the first one with
     a matching name.
   - Missing "desc" attributes on params are read as empty.
 * 0.3
   - Added strict reading mode and parse warnings.
   - Added ini settings and the command line entry point.
'''

def Get_Version():
    '''
    Returns the highest version number in the change log,
    as a string, eg. '0.3'.
    '''
    # Traverse the docstring, looking for ' *' lines, and keep recording
    #  strings as they are seen.
    version = ''
    for line in __doc__.splitlines():
        if not line.startswith(' *'):
            continue
        version = line.split('*')[1].strip()
    return version
