'''
CRYENGINE UI Helper
-----------------

Core of the CRYENGINE UI Helper tool: reads and writes the UIElements
descriptor xml that accompanies a Scaleform swf/gfx asset, describing
the functions and events the flash movie exposes, their typed params,
screen alignment and render layer.

Features include:

  * Streaming reader that turns a descriptor into a UI_Element_Config,
    tolerant of legacy files by default, with an optional strict mode.
  * Writer producing the fixed node layout the GFx toolchain expects.
  * Ini based application settings (GFxExport path and arguments).
  * Command line for checking, summarizing and rewriting descriptors.

Using the codec from python:

  * "from UI_Helper import Read_Config, Write_Config"
  * Read_Config(path) returns a UI_Element_Config, or raises
    Config_Parse_Exception.
  * Write_Config(config, path) writes the xml, or raises
    Config_Write_Exception. The target folder must already exist.

Running the command line:

  * "ui-helper check [xml]" or "python -m UI_Helper check [xml]"
  * Call with -h for full options.
'''
# For use by the doc generator.
description = __doc__

from . import Common
from .Common import Print
from .Common import Get_Version
from .Common import Settings_class
# Allow convenient catching of all special exception types.
from .Common.Exceptions import *

from . import Descriptor
from .Descriptor import *
