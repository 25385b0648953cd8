"""
Shared fixtures for the UI Helper tests.
"""
import pytest

from UI_Helper import Print
from UI_Helper.Descriptor import *


SAMPLE_XML = b"""<?xml version='1.0' encoding='utf-8'?>
<UIElements name="HUD">
    <UIElement name="MainPanel">
        <GFx file="hud.gfx" layer="3">
            <Constraints>
                <Align mode="dynamic" valign="top" halign="left"/>
            </Constraints>
        </GFx>
        <functions>
            <function name="OnShow" funcname="OnShow">
                <param name="visible" type="bool"/>
            </function>
            <function name="SetScore" funcname="SetScore">
                <param name="score" desc="Points so far" type="int"/>
                <param name="label"/>
            </function>
        </functions>
        <events>
            <event name="OnClick" fscommand="OnClick"/>
        </events>
    </UIElement>
</UIElements>
"""


def make_xml(align = '<Align mode="dynamic" valign="center" halign="center"/>',
             body = '', layer = '0'):
    """Builds a minimal descriptor around the given Align node and body."""
    return (
        '<UIElements name="Group"><UIElement name="Element">'
        '<GFx file="x.gfx" layer="{}"><Constraints>{}</Constraints></GFx>'
        '{}</UIElement></UIElements>'
        ).format(layer, align, body).encode('utf-8')


@pytest.fixture(autouse=True)
def printed():
    """Captures everything sent through Print, restoring it afterwards."""
    lines = []
    Print.logging_function = lines.append
    Print.verbose = True
    yield lines
    Print.logging_function = None
    Print.verbose = True


@pytest.fixture
def sample_config():
    """The config matching SAMPLE_XML, minus the write-only gfx name."""
    return UI_Element_Config(
        elements_name = 'HUD',
        element_name = 'MainPanel',
        gfx_layer = 3,
        fullscreen = False,
        halign = HAlign.Left,
        valign = VAlign.Top,
        functions = [
            UI_Runnable('OnShow', [
                UI_Parameter('visible', '', Parameter_Type.Bool)]),
            UI_Runnable('SetScore', [
                UI_Parameter('score', 'Points so far', Parameter_Type.Int),
                UI_Parameter('label')]),
            ],
        events = [UI_Runnable('OnClick')],
        )


@pytest.fixture
def sample_xml_path(tmp_path):
    """SAMPLE_XML written to a temporary file."""
    path = tmp_path / 'hud.xml'
    path.write_bytes(SAMPLE_XML)
    return path
