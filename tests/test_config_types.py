"""
Tests for the descriptor data types.
"""
from UI_Helper.Descriptor import *


def test_from_text_ignores_case():
    assert HAlign.From_Text('CENTER') is HAlign.Center
    assert VAlign.From_Text('Bottom') is VAlign.Bottom
    assert Parameter_Type.From_Text('String') is Parameter_Type.String


def test_from_text_unrecognized():
    assert HAlign.From_Text('top') is None
    assert VAlign.From_Text(None) is None
    assert Parameter_Type.From_Text('double') is None


def test_any_type_has_no_wire_form():
    assert Parameter_Type.Any.wire is None
    assert [t.wire for t in Parameter_Type if t is not Parameter_Type.Any] == [
        'int', 'bool', 'string', 'float']


def test_config_defaults():
    config = UI_Element_Config()
    assert config.halign is HAlign.Center
    assert config.valign is VAlign.Center
    assert config.fullscreen is False
    assert config.gfx_layer == 0
    assert config.functions == [] and config.events == []


def test_matches_ignores_gfx_file_name():
    first = UI_Element_Config(gfx_file_name = 'a.gfx')
    second = UI_Element_Config(gfx_file_name = 'b.gfx')
    assert first.Matches(second)
    assert first != second


def test_lists_are_not_shared():
    functions = [UI_Runnable('F')]
    config = UI_Element_Config(functions = functions)
    config.functions.append(UI_Runnable('G'))
    assert len(functions) == 1
    assert UI_Element_Config().functions is not UI_Element_Config().functions
