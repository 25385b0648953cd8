'''
Holds modules that will be commonly imported by the codec
and the command line.
'''
# Import exceptions early, due to some dependency issues.
from .Exceptions import *

from . import Change_Log
from .Change_Log import Get_Version
from .Print import Print
from .Settings import Settings_class
from .Settings import Get_Default_Config_Path
