'''
Main function for the UI Helper command line.
Lets descriptor xml files be checked, summarized and rewritten without
the gui, and the saved application settings be viewed or changed.
'''
import sys
from pathlib import Path
import argparse
import traceback

from .Common import Print
from .Common import Get_Version
from .Common import Settings_class
from .Common.Exceptions import Config_Parse_Exception, Config_Write_Exception
from .Descriptor import Config_Reader, Write_Config


def Build_Parser():
    '''
    Returns the ArgumentParser for the command line.
    '''
    argparser = argparse.ArgumentParser(
        prog = 'ui-helper',
        description = 'CRYENGINE UI Helper version {}: descriptor xml tools.'.format(
            Get_Version()),
        allow_abbrev = False,
        )

    argparser.add_argument(
        '-config',
        default = None,
        help = 'Path to the settings ini file; defaults to config.ini in'
               ' the user config folder.')

    argparser.add_argument(
        '-dev',
        action = 'store_true',
        help = 'Enables developer mode, which prints tracebacks and'
               ' re-raises unexpected exceptions.')

    argparser.add_argument(
        '-quiet',
        action = 'store_true',
        help = 'Hides some status messages.')

    subparsers = argparser.add_subparsers(dest = 'command')

    check_parser = subparsers.add_parser(
        'check',
        help = 'Read a descriptor xml and report any problems.')
    check_parser.add_argument('xml_path', help = 'Descriptor xml to read.')
    check_parser.add_argument(
        '-strict',
        action = 'store_true',
        help = 'Treat tolerated problems (orphan params, unknown'
               ' alignment or type values) as errors.')

    show_parser = subparsers.add_parser(
        'show',
        help = 'Print a summary of a descriptor xml.')
    show_parser.add_argument('xml_path', help = 'Descriptor xml to read.')

    rewrite_parser = subparsers.add_parser(
        'rewrite',
        help = 'Read a descriptor xml and write it back in standard form.')
    rewrite_parser.add_argument('xml_path', help = 'Descriptor xml to read.')
    rewrite_parser.add_argument(
        '-o',
        dest = 'output_path',
        default = None,
        help = 'Where to write the result; defaults to overwriting the input.')
    rewrite_parser.add_argument(
        '-gfx',
        dest = 'gfx_file_name',
        default = None,
        help = 'Gfx file name for the GFx node; defaults to the output'
               ' name with a .gfx suffix.')

    settings_parser = subparsers.add_parser(
        'settings',
        help = 'Print the saved settings, or change them.')
    settings_parser.add_argument(
        '-gfxexport',
        dest = 'path_to_gfxexport_bin',
        default = None,
        help = 'Set the path to the GFxExport executable.')
    settings_parser.add_argument(
        '-exportargs',
        dest = 'export_arguments',
        default = None,
        help = 'Set the extra arguments passed to GFxExport.')

    return argparser


def Summarize_Config(config):
    '''
    Returns a list of text lines describing a UI_Element_Config.
    '''
    lines = []
    lines.append('UIElements "{}"'.format(config.elements_name))
    lines.append('  UIElement "{}"'.format(config.element_name))
    lines.append('  layer: {}'.format(config.gfx_layer))
    if config.fullscreen:
        lines.append('  align: fullscreen')
    else:
        lines.append('  align: {} {}'.format(config.valign.wire, config.halign.wire))

    for title, runnables in [('functions', config.functions),
                             ('events', config.events)]:
        lines.append('  {}: {}'.format(title, len(runnables)))
        for runnable in runnables:
            lines.append('    {}'.format(runnable.name))
            for parameter in runnable.parameters:
                line = '      {}'.format(parameter.name)
                if parameter.type.wire != None:
                    line += ' : {}'.format(parameter.type.wire)
                if parameter.description:
                    line += ' - {}'.format(parameter.description)
                lines.append(line)
    return lines


def _Check(args):
    reader = Config_Reader(strict = args.strict)
    reader.Read(args.xml_path)
    for warning in reader.warnings:
        Print('Warning: {}'.format(warning))
    Print('{} read with {} warning(s).'.format(
        args.xml_path, len(reader.warnings)), verbose = True)
    return 0


def _Show(args):
    config = Config_Reader().Read(args.xml_path)
    for line in Summarize_Config(config):
        Print(line)
    return 0


def _Rewrite(args):
    reader = Config_Reader()
    config = reader.Read(args.xml_path)
    for warning in reader.warnings:
        Print('Warning: {}'.format(warning))

    output_path = Path(args.output_path or args.xml_path)
    if args.gfx_file_name:
        config.gfx_file_name = args.gfx_file_name
    else:
        config.gfx_file_name = output_path.with_suffix('.gfx').name

    # The writer expects the folder to exist.
    if not output_path.parent.exists():
        output_path.parent.mkdir(parents = True)
    Write_Config(config, output_path)
    Print('Wrote {}'.format(output_path), verbose = True)
    return 0


def _Settings(args):
    settings = Settings_class(args.config)
    settings.Load()

    changes = {}
    for field in ['path_to_gfxexport_bin', 'export_arguments']:
        value = getattr(args, field)
        if value != None:
            changes[field] = value
    if changes:
        settings(**changes)
        settings.Save()
        Print('Saved {}'.format(settings.config_path), verbose = True)

    for category, field_list in settings.Get_Categorized_Fields().items():
        Print('{}:'.format(category))
        for field in field_list:
            Print('  {} = {}'.format(field, getattr(settings, field)))
    return 0


_command_functions = {
    'check'   : _Check,
    'show'    : _Show,
    'rewrite' : _Rewrite,
    'settings': _Settings,
    }


def Run(*args):
    '''
    Run the command line with the given args (excluding the program
    name). Returns the exit status: 0 on success, 1 on a descriptor
    error, 2 when no command is given. Bad arguments make argparse
    raise SystemExit, as usual.
    '''
    argparser = Build_Parser()
    args = argparser.parse_args(args)

    if args.command == None:
        argparser.print_help()
        return 2

    Print.verbose = not args.quiet
    try:
        return _command_functions[args.command](args)

    except (Config_Parse_Exception, Config_Write_Exception) as ex:
        Print('Error: {}'.format(ex))
        return 1

    except Exception as ex:
        # Make a nice message, to prevent a full stack trace being
        #  dropped on the user.
        Print('Exception of type "{}" encountered.'.format(type(ex).__name__))
        ex_text = str(ex)
        if ex_text:
            Print(ex_text)
        if args.dev:
            Print(traceback.format_exc())
            raise
        return 1


def Main():
    'Console script entry point.'
    sys.exit(Run(*sys.argv[1:]))


if __name__ == '__main__':
    Main()
