'''
Container for application settings, persisted to an ini file.
Import as:
    from UI_Helper.Common.Settings import Settings_class

Unlike the codec, which holds no state, these settings belong to the
surrounding application. A Settings_class object is created once by
the application and passed to whatever needs it.
'''
import os
import configparser
from pathlib import Path
from collections import OrderedDict
from .Print import Print

# Folder and file name used under the user config directory.
config_dir_name  = 'CRYENGINE UI Helper'
config_file_name = 'config.ini'


def Get_Default_Config_Path():
    '''
    Returns the Path to the default ini file, in the per-user
    config folder of the OS. The folder is not created here.
    '''
    # Windows keeps roaming app data under APPDATA; elsewhere follow
    # the XDG convention.
    if os.name == 'nt' and os.environ.get('APPDATA'):
        base = Path(os.environ['APPDATA'])
    elif os.environ.get('XDG_CONFIG_HOME'):
        base = Path(os.environ['XDG_CONFIG_HOME'])
    else:
        base = Path.home() / '.config'
    return base / config_dir_name / config_file_name


class Settings_class:
    '''
    This holds general settings for the helper application, such as
    the location of the GFxExport binary.

    Settings are read from an ini file when Load is called, and written
    back with Save. Each category below is stored as an ini section of
    the same name, lowercased.

    Example config.ini:
      <code>
          [paths]
          path_to_gfxexport_bin = C:/Tools/GFxExport.exe
          path_to_last_directory = C:/Projects/Assets/ui

          [export]
          export_arguments = -i DDS -share_images
      </code>

    Paths:
    * path_to_gfxexport_bin
      - String, path to the GFxExport executable used to turn a swf
        into a gfx file.
      - Defaults to an empty string, meaning not yet configured.
    * path_to_last_directory
      - String, folder last used when picking a swf or xml file, so
        the next dialog can open there.
      - Defaults to an empty string.

    Export:
    * export_arguments
      - String, extra command line arguments passed to GFxExport ahead
        of the output folder flag.
      - Defaults to "-i DDS".

    Attributes:
    * config_path
      - Path to the ini file used by Load and Save.
    '''
    def __init__(self, config_path = None):
        if config_path == None:
            config_path = Get_Default_Config_Path()
        self.config_path = Path(config_path)

        # Fill in initial defaults.
        for field, default in self.Get_Defaults().items():
            setattr(self, field, default)
        return


    def Get_Defaults(self):
        '''
        Returns a dict holding fields and their default values.
        '''
        defaults = {}
        defaults['path_to_gfxexport_bin'] = ''
        defaults['path_to_last_directory'] = ''
        defaults['export_arguments'] = '-i DDS'
        return defaults


    def Get_Categorized_Fields(self):
        '''
        Returns an OrderedDict, keyed by category, with a list of fields in
        their preferred display order. Parses the docstring to determine
        this ordering.
        '''
        category_list_dict = OrderedDict()
        category = None

        # Work through the docstring.
        for line in self.__doc__.splitlines():

            # Category titles are single words with an ending :, no
            #  prefix.
            strip_line = line.strip()
            if (strip_line.endswith(':') and strip_line[0] not in ['-','*']
            and ' ' not in strip_line):
                category = strip_line.replace(':','')

            # Fields are recognized names after a *.
            elif strip_line.startswith('*'):
                field = strip_line.replace('*','').strip()

                # Only fields with defaults count; this skips the
                # Attributes entries.
                if field in self.Get_Defaults():
                    # A category should have been found at this point.
                    assert category != None
                    if category not in category_list_dict:
                        category_list_dict[category] = []
                    category_list_dict[category].append(field)

        return category_list_dict


    def Load(self):
        '''
        Load settings from the ini file.
        If the file does not exist it is created with the current values.
        If some fields are missing from it, it is resaved with all
        fields filled in. An unreadable file is reported and skipped,
        leaving the current values in place.
        Returns a list of field names updated.
        '''
        fields_updated = []

        if not self.config_path.exists():
            # No file found; create a new one.
            self._Save_Non_Critical()
            return fields_updated

        config = configparser.ConfigParser(interpolation = None)
        try:
            with open(self.config_path, 'r', encoding = 'utf-8') as file:
                config.read_file(file)
        except (OSError, UnicodeDecodeError, configparser.Error) as ex:
            Print(('Warning: skipping load of "{}" due to {}.'
                    ).format(self.config_path, type(ex).__name__))
            return fields_updated

        some_values_were_empty = False
        for category, field_list in self.Get_Categorized_Fields().items():
            section = category.lower()
            for field in field_list:
                if not config.has_option(section, field):
                    some_values_were_empty = True
                    continue
                setattr(self, field, config.get(section, field))
                fields_updated.append(field)

        # Resave if needed, to fill in the missing values.
        if some_values_were_empty:
            self._Save_Non_Critical()
        return fields_updated


    def Save(self):
        '''
        Save all settings fields to the ini file, creating its folder
        if needed. Raises OSError if the file cannot be written.
        '''
        config = configparser.ConfigParser(interpolation = None)
        for category, field_list in self.Get_Categorized_Fields().items():
            section = category.lower()
            config[section] = OrderedDict(
                (field, str(getattr(self, field))) for field in field_list)

        if not self.config_path.parent.exists():
            self.config_path.parent.mkdir(parents = True)
        with open(self.config_path, 'w', encoding = 'utf-8') as file:
            config.write(file)
        return


    def _Save_Non_Critical(self):
        '''
        Save, reporting but otherwise ignoring any failure.
        '''
        try:
            self.Save()
        except OSError as ex:
            Print('Warning: could not save settings to "{}": {}'.format(
                self.config_path, ex))
        return


    def __call__(self, *args, **kwargs):
        '''
        Convenience function for applying settings by calling
        the settings object with fields to set.
        '''
        # Ignore args; just grab kwargs.
        for name, value in kwargs.items():
            # Warn on unexpected names.
            if name not in self.Get_Defaults():
                Print('Warning: setting "{}" not recognized'.format(name))
            else:
                setattr(self, name, value)
        return
