'''
Classes to represent a UI element descriptor, as read from or written
to the UIElements xml consumed by the CRYENGINE GFx toolchain.
'''
__all__ = [
    'HAlign',
    'VAlign',
    'Parameter_Type',
    'UI_Parameter',
    'UI_Runnable',
    'UI_Element_Config',
    ]

from enum import Enum


class _Wire_Enum(Enum):
    '''
    Base for enums with a lowercase text form in the xml.
    '''
    @classmethod
    def From_Text(cls, text):
        '''
        Returns the member matching the given text, compared without
        case, or None if there is no match.
        '''
        if text == None:
            return None
        text = text.lower()
        for member in cls:
            if member.value == text:
                return member
        return None

    @property
    def wire(self):
        'Text written to the xml for this member.'
        return self.value


class HAlign(_Wire_Enum):
    Left   = 'left'
    Center = 'center'
    Right  = 'right'


class VAlign(_Wire_Enum):
    Top    = 'top'
    Center = 'center'
    Bottom = 'bottom'


class Parameter_Type(_Wire_Enum):
    '''
    Type of a function or event parameter. Any is the untyped default,
    and is never written out.
    '''
    Any    = 'any'
    Int    = 'int'
    Bool   = 'bool'
    String = 'string'
    Float  = 'float'

    @property
    def wire(self):
        'Text written to the xml, or None for Any.'
        if self is Parameter_Type.Any:
            return None
        return self.value


class UI_Parameter:
    '''
    A single parameter of a function or event.

    Attributes:
    * name
      - String, parameter name.
    * description
      - String, optional description; written only when not empty.
    * type
      - Parameter_Type, defaults to Any.
    '''
    def __init__(self, name, description = '', type = Parameter_Type.Any):
        self.name = name
        self.description = description
        self.type = type
        return

    def __eq__(self, other):
        if not isinstance(other, UI_Parameter):
            return NotImplemented
        return (self.name == other.name
                and self.description == other.description
                and self.type == other.type)

    def __repr__(self):
        return 'UI_Parameter({!r}, {!r}, {})'.format(
            self.name, self.description, self.type)


class UI_Runnable:
    '''
    A function or event exposed by the UI element.
    Both kinds share this shape; which one it is depends on the list
    holding it.

    Attributes:
    * name
      - String, name used in the xml "name" attribute, and copied into
        "funcname" or "fscommand".
    * parameters
      - List of UI_Parameter, in declaration order. Names are not
        required to be unique.
    '''
    def __init__(self, name, parameters = None):
        self.name = name
        self.parameters = list(parameters) if parameters else []
        return

    def __eq__(self, other):
        if not isinstance(other, UI_Runnable):
            return NotImplemented
        return (self.name == other.name
                and self.parameters == other.parameters)

    def __repr__(self):
        return 'UI_Runnable({!r}, {!r})'.format(self.name, self.parameters)


class UI_Element_Config:
    '''
    Full description of a UI element, as stored in one descriptor xml.

    Attributes:
    * elements_name
      - String, name of the root UIElements node.
    * element_name
      - String, name of the UIElement node.
    * gfx_file_name
      - String, gfx file referenced by the GFx node.
      - Only written; reading a descriptor leaves this empty.
    * gfx_layer
      - Int, non-negative render layer.
    * fullscreen
      - Bool, if True the element is maximized and halign/valign
        are not used.
    * halign
      - HAlign, defaults to Center.
    * valign
      - VAlign, defaults to Center.
    * functions
      - List of UI_Runnable, functions callable on the element.
    * events
      - List of UI_Runnable, events raised by the element.
    '''
    # Fields compared by Matches, which excludes the write-only ones.
    _round_trip_fields = [
        'elements_name',
        'element_name',
        'gfx_layer',
        'fullscreen',
        'halign',
        'valign',
        'functions',
        'events',
        ]

    def __init__(
            self,
            elements_name = '',
            element_name = '',
            gfx_file_name = '',
            gfx_layer = 0,
            fullscreen = False,
            halign = HAlign.Center,
            valign = VAlign.Center,
            functions = None,
            events = None,
        ):
        self.elements_name = elements_name
        self.element_name = element_name
        self.gfx_file_name = gfx_file_name
        self.gfx_layer = gfx_layer
        self.fullscreen = fullscreen
        self.halign = halign
        self.valign = valign
        self.functions = list(functions) if functions else []
        self.events = list(events) if events else []
        return

    def Matches(self, other):
        '''
        Returns True if the other config holds the same content on all
        fields that survive a write and read back, ie. everything except
        gfx_file_name.
        '''
        return all(getattr(self, field) == getattr(other, field)
                   for field in self._round_trip_fields)

    def __eq__(self, other):
        if not isinstance(other, UI_Element_Config):
            return NotImplemented
        return (self.Matches(other)
                and self.gfx_file_name == other.gfx_file_name)

    def __repr__(self):
        return ('UI_Element_Config(elements_name={!r}, element_name={!r},'
                ' gfx_file_name={!r}, gfx_layer={!r}, fullscreen={!r},'
                ' halign={}, valign={}, functions={!r}, events={!r})'
                ).format(
                    self.elements_name, self.element_name,
                    self.gfx_file_name, self.gfx_layer, self.fullscreen,
                    self.halign, self.valign, self.functions, self.events)
