'''
Holds the descriptor xml codec: data types, reader and writer.
'''
from .Config_Types import *
from .Config_Reader import Config_Reader, Read_Config
from .Config_Writer import Build_Config_XML, Get_Config_Binary, Write_Config
