'''
Writer for UI element descriptor xml files.

Node layout is fixed, independent of how the config was built:

    UIElements
      UIElement
        GFx
          Constraints
            Align
        functions       (only if there are functions)
          function      (self-closing when it has no params)
            param
        events          (only if there are events)
          event
            param

Functions repeat their name in "funcname", and events in "fscommand",
which is what the GFx toolchain looks up.
'''
__all__ = [
    'Build_Config_XML',
    'Get_Config_Binary',
    'Write_Config',
    ]

from lxml import etree as ET

from ..Common.Exceptions import Config_Write_Exception
from .Config_Types import *

# Indentation used by the toolchain's own descriptor files.
indent_space = '    '


def Build_Config_XML(config):
    '''
    Returns the UIElements root Element for the given UI_Element_Config.
    Raises ValueError or TypeError on values that cannot be put in xml.
    '''
    if (not isinstance(config.gfx_layer, int)
    or isinstance(config.gfx_layer, bool)
    or config.gfx_layer < 0):
        raise ValueError('gfx_layer must be a non-negative integer, got {!r}'.format(
            config.gfx_layer))

    root = ET.Element('UIElements', name = config.elements_name)
    element_node = ET.SubElement(root, 'UIElement', name = config.element_name)

    gfx_node = ET.SubElement(element_node, 'GFx')
    gfx_node.set('file', config.gfx_file_name)
    gfx_node.set('layer', str(config.gfx_layer))

    constraints_node = ET.SubElement(gfx_node, 'Constraints')
    align_node = ET.SubElement(constraints_node, 'Align')
    if config.fullscreen:
        align_node.set('mode', 'fullscreen')
        align_node.set('scale', '1')
        align_node.set('maximize', '1')
    else:
        align_node.set('mode', 'dynamic')
        align_node.set('valign', config.valign.wire)
        align_node.set('halign', config.halign.wire)

    # Empty lists leave out their parent node entirely.
    if config.functions:
        functions_node = ET.SubElement(element_node, 'functions')
        for runnable in config.functions:
            _Add_Runnable(functions_node, 'function', 'funcname', runnable)

    if config.events:
        events_node = ET.SubElement(element_node, 'events')
        for runnable in config.events:
            _Add_Runnable(events_node, 'event', 'fscommand', runnable)

    return root


def _Add_Runnable(parent_node, tag, alias_attribute, runnable):
    '''
    Append a function or event node, with its params, to the parent.
    '''
    node = ET.SubElement(parent_node, tag)
    node.set('name', runnable.name)
    node.set(alias_attribute, runnable.name)

    for parameter in runnable.parameters:
        param_node = ET.SubElement(node, 'param')
        param_node.set('name', parameter.name)
        if parameter.description:
            param_node.set('desc', parameter.description)
        if parameter.type.wire != None:
            param_node.set('type', parameter.type.wire)
    return


def Get_Config_Binary(config):
    '''
    Returns bytes holding the full utf-8 descriptor xml for the config,
    with declaration and 4-space indentation.
    Raises Config_Write_Exception if the config cannot be encoded.
    '''
    try:
        root = Build_Config_XML(config)
        ET.indent(root, space = indent_space)
        binary = ET.tostring(
            ET.ElementTree(root),
            encoding = 'utf-8',
            xml_declaration = True)
    except (ValueError, TypeError, AttributeError) as ex:
        raise Config_Write_Exception(
            'Could not encode descriptor xml: {}'.format(ex)) from ex
    return binary + b'\n'


def Write_Config(config, file_path):
    '''
    Write the config as descriptor xml to the target file_path,
    replacing any existing file.
    The folder must already exist.
    Raises Config_Write_Exception on encoding or I/O failure.
    '''
    # Get binary first, in case of error, then open the file to write.
    binary = Get_Config_Binary(config)
    try:
        with open(file_path, 'wb') as file:
            file.write(binary)
    except (OSError, ValueError) as ex:
        raise Config_Write_Exception(
            'Could not write "{}": {}'.format(file_path, ex)) from ex
    return
