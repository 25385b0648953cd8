"""
Tests for the descriptor writer.
"""
import pytest
from lxml import etree as ET

from UI_Helper.Common.Exceptions import Config_Write_Exception
from UI_Helper.Descriptor import *


EXPECTED_SAMPLE = (
    "<?xml version='1.0' encoding='utf-8'?>\n"
    '<UIElements name="HUD">\n'
    '    <UIElement name="MainPanel">\n'
    '        <GFx file="hud.gfx" layer="3">\n'
    '            <Constraints>\n'
    '                <Align mode="dynamic" valign="top" halign="left"/>\n'
    '            </Constraints>\n'
    '        </GFx>\n'
    '        <functions>\n'
    '            <function name="OnShow" funcname="OnShow">\n'
    '                <param name="visible" type="bool"/>\n'
    '            </function>\n'
    '            <function name="SetScore" funcname="SetScore">\n'
    '                <param name="score" desc="Points so far" type="int"/>\n'
    '                <param name="label"/>\n'
    '            </function>\n'
    '        </functions>\n'
    '        <events>\n'
    '            <event name="OnClick" fscommand="OnClick"/>\n'
    '        </events>\n'
    '    </UIElement>\n'
    '</UIElements>\n'
    ).encode('utf-8')


def parse(binary):
    return ET.fromstring(binary)


def test_sample_layout(sample_config):
    sample_config.gfx_file_name = 'hud.gfx'
    assert Get_Config_Binary(sample_config) == EXPECTED_SAMPLE


def test_write_config_creates_file(tmp_path, sample_config):
    sample_config.gfx_file_name = 'hud.gfx'
    path = tmp_path / 'hud.xml'
    Write_Config(sample_config, path)
    assert path.read_bytes() == EXPECTED_SAMPLE


def test_write_config_truncates_existing_file(tmp_path):
    path = tmp_path / 'hud.xml'
    path.write_bytes(b'x' * 10000)
    Write_Config(UI_Element_Config(elements_name = 'A', element_name = 'B'), path)
    assert not path.read_bytes().endswith(b'x')
    assert parse(path.read_bytes()).get('name') == 'A'


def test_fullscreen_suppresses_alignment():
    config = UI_Element_Config(
        fullscreen = True, halign = HAlign.Right, valign = VAlign.Bottom)
    align = parse(Get_Config_Binary(config)).find('UIElement/GFx/Constraints/Align')
    assert dict(align.attrib) == {'mode': 'fullscreen', 'scale': '1', 'maximize': '1'}


def test_dynamic_alignment_attributes():
    config = UI_Element_Config(halign = HAlign.Right, valign = VAlign.Bottom)
    align = parse(Get_Config_Binary(config)).find('UIElement/GFx/Constraints/Align')
    assert list(align.attrib.items()) == [
        ('mode', 'dynamic'), ('valign', 'bottom'), ('halign', 'right')]


def test_optional_param_attributes_are_omitted():
    config = UI_Element_Config(functions = [
        UI_Runnable('F', [
            UI_Parameter('plain'),
            UI_Parameter('count', '', Parameter_Type.Int),
            UI_Parameter('text', 'Shown text', Parameter_Type.String),
            ]),
        ])
    params = parse(Get_Config_Binary(config)).findall('UIElement/functions/function/param')
    assert [dict(p.attrib) for p in params] == [
        {'name': 'plain'},
        {'name': 'count', 'type': 'int'},
        {'name': 'text', 'desc': 'Shown text', 'type': 'string'},
        ]


def test_empty_lists_omit_parent_nodes():
    binary = Get_Config_Binary(UI_Element_Config())
    assert b'<functions' not in binary
    assert b'<events' not in binary


def test_events_without_functions():
    config = UI_Element_Config(events = [UI_Runnable('OnHide')])
    element = parse(Get_Config_Binary(config)).find('UIElement')
    assert [child.tag for child in element] == ['GFx', 'events']
    assert element.find('events/event').get('fscommand') == 'OnHide'


def test_runnable_without_params_self_closes():
    config = UI_Element_Config(
        functions = [UI_Runnable('Reset')],
        events = [UI_Runnable('OnDone')])
    binary = Get_Config_Binary(config)
    assert b'<function name="Reset" funcname="Reset"/>' in binary
    assert b'<event name="OnDone" fscommand="OnDone"/>' in binary
    assert b'</function>' not in binary
    assert b'</event>' not in binary


def test_values_are_escaped():
    config = UI_Element_Config(
        elements_name = 'A&B',
        functions = [UI_Runnable('F', [UI_Parameter('p', '<"quoted">')])])
    binary = Get_Config_Binary(config)
    assert b'name="A&amp;B"' in binary
    assert b'desc="&lt;&quot;quoted&quot;&gt;"' in binary


def test_illegal_characters_raise(tmp_path):
    config = UI_Element_Config(elements_name = 'bad\x01name')
    path = tmp_path / 'bad.xml'
    with pytest.raises(Config_Write_Exception):
        Write_Config(config, path)
    # Encoding fails before the destination is opened.
    assert not path.exists()


@pytest.mark.parametrize('layer', [-1, '3', 1.5, True])
def test_bad_layer_raises(layer):
    with pytest.raises(Config_Write_Exception):
        Get_Config_Binary(UI_Element_Config(gfx_layer = layer))


def test_missing_folder_raises(tmp_path):
    with pytest.raises(Config_Write_Exception) as info:
        Write_Config(UI_Element_Config(), tmp_path / 'nope' / 'out.xml')
    assert isinstance(info.value.__cause__, OSError)


def test_build_config_xml_node_order(sample_config):
    root = Build_Config_XML(sample_config)
    assert root.tag == 'UIElements'
    assert [node.tag for node in root.iter()][:5] == [
        'UIElements', 'UIElement', 'GFx', 'Constraints', 'Align']


def test_invalid_path_raises(tmp_path):
    with pytest.raises(Config_Write_Exception) as info:
        Write_Config(UI_Element_Config(), str(tmp_path) + '/bad\x00name.xml')
    assert isinstance(info.value.__cause__, ValueError)
