import configparser
import os

RC_FILE_HELP = """\
Sample rcfile:
    [import]
    order = category, family, attribute, option, product_model, \
family_variant, product
    [ui]
    color = auto|always|never  # default=auto
"""

DEFAULT_IMPORT_ORDER = (
    "category",
    "family",
    "attribute",
    "option",
    "product_model",
    "family_variant",
    "product",
)


class ConfigEnum(object):
    __slots__ = (
        'defaultName',
        '_enumVals',
    )

    def __init__(self, default, **enumVals):
        self._enumVals = enumVals
        assert default in enumVals
        self.defaultName = default
        for enumName in enumVals:
            assert enumName not in self.__slots__

    def values(self):
        return iter(self._enumVals.values())

    @property
    def defaultVal(self):
        return self._enumVals[self.defaultName]

    def __getattr__(self, attr):
        assert attr != '_enumVals'
        if attr in self._enumVals:
            return self._enumVals[attr]
        else:
            return object.__getattribute__(self, attr)


UI_COLOR = ConfigEnum(
    'AUTO',  # default
    AUTO='auto',
    ALWAYS='always',
    NEVER='never',
)


def _getConfig(cfgParser, section, option, defaultValue=None):
    if not cfgParser.has_section(section):
        return defaultValue
    if not cfgParser.has_option(section, option):
        return defaultValue
    return cfgParser.get(section, option)


def _getEnumConfig(cfgParser, section, option, enum):
    optionVal = _getConfig(
        cfgParser, section, option, enum.defaultVal)
    if optionVal not in list(enum.values()):
        raise ConfigError(
            "RC file has invalid \"{section}.{option}\" setting {optionVal}.  Valid "
            "options: {allowedVals}".format(
                section=section,
                option=option,
                optionVal=optionVal,
                allowedVals=", ".join(list(enum.values()))))

    return optionVal


def _getListConfig(cfgParser, section, option, default):
    val = _getConfig(cfgParser, section, option, None)
    if val is None:
        return list(default)
    return [item.strip() for item in val.split(",") if item.strip()]


class ConfigError(Exception):
    pass


class Config(object):
    validConfig = {
        'import': {'order'},
        'ui': {'color'},
    }

    def _validateConfigParser(self, cfgParser):
        cfgSections = set(cfgParser.sections())
        unknownSections = cfgSections - set(self.validConfig.keys())
        if unknownSections:
            raise ConfigError(
                "RC file has unknown configuration sections: {}".format(
                    ", ".join(sorted(unknownSections))))
        for section in cfgSections:
            cfgValues = set(cfgParser.options(section))
            unknownOptions = cfgValues - self.validConfig[section]
            if unknownOptions:
                raise ConfigError(
                    "RC file has unknown configuration options in "
                    "section \"{}\": {}".format(
                        section, ", ".join(sorted(unknownOptions))))

    def __init__(self, options):
        stateDir = options.stateDir
        self.options = options
        self._logDir = os.path.expanduser(stateDir) + "/log/"
        self._cacheDir = os.path.expanduser(stateDir) + "/cache/"

        rcFile = os.path.expanduser(options.rcFile)
        cfgParser = configparser.RawConfigParser()
        try:
            cfgParser.read(rcFile)
        except configparser.Error as error:
            raise ConfigError("RC file {} is malformed: {}".format(
                rcFile, error)) from error

        self._importOrder = _getListConfig(
            cfgParser, 'import', 'order', DEFAULT_IMPORT_ORDER)
        self._uiColor = _getEnumConfig(cfgParser, 'ui', 'color', UI_COLOR)

        self._validateConfigParser(cfgParser)

    @property
    def verbose(self):
        return len(self.options.verbose) if self.options.verbose else 0

    @staticmethod
    def checkDir(dirName):
        if not os.access(dirName, os.W_OK | os.X_OK | os.R_OK):
            os.makedirs(dirName, exist_ok=True)
        return dirName

    @property
    def logDir(self):
        return self.checkDir(self._logDir)

    @property
    def cacheDir(self):
        return self.checkDir(self._cacheDir)

    @property
    def importOrder(self):
        return list(self._importOrder)

    @property
    def colorOutput(self):
        """
        Returns True/False when color is forced on/off, None to let the output
        stream decide.
        """
        if self._uiColor == UI_COLOR.ALWAYS:
            return True
        elif self._uiColor == UI_COLOR.NEVER:
            return False
        return None
