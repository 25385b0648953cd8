'''
Reader for UI element descriptor xml files.

The file is scanned once, front to back, using lxml's iterparse; nodes
are dropped as soon as they close, so no tree is kept around. Each
recognized start tag updates the UI_Element_Config being built:

    UIElements  name              -> elements_name
    UIElement   name              -> element_name
    GFx         layer             -> gfx_layer
    Align       mode, valign, halign
    function    name              -> new entry in functions
    event       name              -> new entry in events
    param       name, desc, type  -> added to the open function or event

Self-closing and open/close forms are treated the same. Unknown tags
are ignored.

Note on params:
    A param belongs to the function or event most recently opened in
    the current list. This is tracked by reference, so two functions
    sharing a name keep their own params. A param seen before any
    function or event of its list has nowhere to go and is dropped;
    legacy files are read this way, so it is only a warning unless
    strict mode is on.
'''
__all__ = [
    'Config_Reader',
    'Read_Config',
    ]

import re
from pathlib import Path
from lxml import etree as ET

from ..Common.Exceptions import Config_Parse_Exception, Config_Parse_Warning
from .Config_Types import *

# Scan states. The state only moves forward through the document
# sections, except that the two lists may alternate.
Awaiting_Root     = 'Awaiting_Root'
In_UI_Element     = 'In_UI_Element'
In_Functions_List = 'In_Functions_List'
In_Events_List    = 'In_Events_List'

# Unsigned decimal, with the optional plus sign that integer parsing
# of the original tool accepted.
_layer_re = re.compile(r'\+?[0-9]+')


class Config_Reader:
    '''
    Single use helper that turns one descriptor xml into a
    UI_Element_Config. Create a new reader, or call Read again, for
    each file; no state carries over between reads.

    Parameters:
    * strict
      - Bool, if True then problems normally tolerated (params with no
        owner, unrecognized alignment or type values, a root node that
        is not UIElements) raise Config_Parse_Exception.
      - Defaults to False.

    Attributes:
    * warnings
      - List of Config_Parse_Warning, the problems tolerated during the
        last Read, in document order.
    * config
      - UI_Element_Config being filled in.
    * state
      - String, current scan state; one of Awaiting_Root, In_UI_Element,
        In_Functions_List, In_Events_List.
    * open_runnable
      - UI_Runnable most recently opened in the current list, which
        will receive any following params; None if there is none.
    '''
    def __init__(self, strict = False):
        self.strict = strict
        self.warnings = []
        self.config = None
        self.state = Awaiting_Root
        self.open_runnable = None
        return


    def Read(self, source):
        '''
        Read a descriptor and return its UI_Element_Config.

        * source
          - Path or string path to the xml file, or a readable binary
            stream holding the xml. Text mode streams are rejected.

        Raises Config_Parse_Exception on the first fatal problem; no
        partial result is returned.
        '''
        self.warnings = []
        self.config = UI_Element_Config()
        self.state = Awaiting_Root
        self.open_runnable = None

        if isinstance(source, (str, Path)):
            try:
                with open(source, 'rb') as file:
                    self._Scan(file)
            except (OSError, ValueError) as ex:
                # ValueError covers paths open() rejects outright, eg. with
                # an embedded null.
                raise Config_Parse_Exception(
                    'Could not read "{}": {}'.format(source, ex)) from ex
        else:
            self._Scan(source)
        return self.config


    def _Scan(self, stream):
        '''
        Run the event loop over the stream.
        '''
        try:
            for event, node in ET.iterparse(stream, events = ('start', 'end')):
                if event == 'start':
                    self._Handle_Start(node)
                else:
                    # Drop the finished node and any earlier siblings,
                    # so memory does not grow with the document.
                    node.clear(keep_tail = True)
                    parent = node.getparent()
                    if parent is None:
                        continue
                    while node.getprevious() is not None:
                        del parent[0]
        except ET.XMLSyntaxError as ex:
            raise Config_Parse_Exception(
                'Malformed xml: {}'.format(ex)) from ex
        except (OSError, TypeError) as ex:
            # TypeError is what lxml raises for a text mode stream.
            raise Config_Parse_Exception(
                'Could not read xml stream: {}'.format(ex)) from ex
        return


    def _Handle_Start(self, node):
        '''
        Dispatch on the tag of a newly opened node.
        '''
        tag = node.tag
        # Comments and processing instructions have non-string tags.
        if not isinstance(tag, str):
            return
        config = self.config

        if self.state == Awaiting_Root and tag != 'UIElements':
            self._Warn(node, 'Root node is "{}", expected "UIElements"'.format(tag))
            # Carry on as if the root was correct.
            self.state = In_UI_Element

        if tag == 'UIElements':
            config.elements_name = self._Get_Attribute(node, 'name')
            self.state = In_UI_Element

        elif tag == 'UIElement':
            config.element_name = self._Get_Attribute(node, 'name')
            self.state = In_UI_Element

        elif tag == 'GFx':
            layer = self._Get_Attribute(node, 'layer')
            if not _layer_re.fullmatch(layer):
                raise Config_Parse_Exception(
                    'Invalid layer "{}", expected a non-negative integer'.format(layer),
                    attribute = 'layer', tag = tag)
            config.gfx_layer = int(layer)

        elif tag == 'Align':
            self._Read_Align(node)

        elif tag == 'functions':
            self._Enter_List(In_Functions_List)

        elif tag == 'events':
            self._Enter_List(In_Events_List)

        elif tag == 'function':
            self._Open_Runnable(node, In_Functions_List)

        elif tag == 'event':
            self._Open_Runnable(node, In_Events_List)

        elif tag == 'param':
            self._Read_Param(node)
        return


    def _Read_Align(self, node):
        '''
        Fill in fullscreen and alignment from an Align node.
        Unrecognized alignment text leaves the prior value.
        '''
        config = self.config
        mode = self._Get_Attribute(node, 'mode')
        if mode == 'fullscreen':
            config.fullscreen = True
            return
        config.fullscreen = False

        valign_text = self._Get_Attribute(node, 'valign')
        valign = VAlign.From_Text(valign_text)
        if valign != None:
            config.valign = valign
        else:
            self._Warn(node, 'Unrecognized valign "{}"'.format(valign_text))

        halign_text = self._Get_Attribute(node, 'halign')
        halign = HAlign.From_Text(halign_text)
        if halign != None:
            config.halign = halign
        else:
            self._Warn(node, 'Unrecognized halign "{}"'.format(halign_text))
        return


    def _Get_Active_List(self):
        '''
        Returns the runnable list matching the current state, or None
        if not inside either list.
        '''
        if self.state == In_Functions_List:
            return self.config.functions
        if self.state == In_Events_List:
            return self.config.events
        return None


    def _Enter_List(self, state):
        '''
        Switch to the given list state. A newly entered list has no
        open runnable yet.
        '''
        if self.state != state:
            self.state = state
            self.open_runnable = None
        return


    def _Open_Runnable(self, node, state):
        '''
        Append a new function or event to its list and make it the
        target for following params.
        '''
        # Read the name before changing state, so a failure leaves
        # nothing half done.
        name = self._Get_Attribute(node, 'name')
        self._Enter_List(state)
        runnable = UI_Runnable(name)
        self._Get_Active_List().append(runnable)
        self.open_runnable = runnable
        return


    def _Read_Param(self, node):
        '''
        Build a UI_Parameter and add it to the open runnable.
        '''
        name = self._Get_Attribute(node, 'name')
        # Written only when not empty, so absence means empty.
        description = node.get('desc', '')

        type_text = node.get('type')
        param_type = Parameter_Type.Any
        if type_text != None:
            param_type = Parameter_Type.From_Text(type_text)
            if param_type == None:
                self._Warn(node, 'Unrecognized type "{}" on param "{}"'.format(
                    type_text, name))
                param_type = Parameter_Type.Any

        if self.open_runnable == None:
            self._Warn(node, 'Param "{}" has no function or event; dropped'.format(name))
            return
        self.open_runnable.parameters.append(
            UI_Parameter(name, description, param_type))
        return


    def _Get_Attribute(self, node, attribute_name):
        '''
        Returns the unescaped value of a required attribute.
        Raises Config_Parse_Exception if it is missing.
        '''
        value = node.get(attribute_name)
        if value == None:
            raise Config_Parse_Exception(
                '"{}" attribute not found on "{}" (line {})'.format(
                    attribute_name, node.tag, node.sourceline),
                attribute = attribute_name, tag = node.tag)
        return value


    def _Warn(self, node, message):
        '''
        Record a tolerated problem, or raise it in strict mode.
        '''
        if self.strict:
            raise Config_Parse_Exception(
                '{} (line {})'.format(message, node.sourceline), tag = node.tag)
        self.warnings.append(
            Config_Parse_Warning(message, tag = node.tag, line = node.sourceline))
        return


def Read_Config(source, strict = False):
    '''
    Read a descriptor xml and return its UI_Element_Config.
    Raises Config_Parse_Exception on failure.

    * source
      - Path, string path, or readable binary stream.
    * strict
      - Bool, if True tolerated problems raise instead; see Config_Reader.
    '''
    return Config_Reader(strict = strict).Read(source)
