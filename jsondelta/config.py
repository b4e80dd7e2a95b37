
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_FILE_NAME = 'jsondelta_config.json'


class JsonDeltaConfigurable(HasTraits):
    """Base of the configurable sections.

    Each subclass is a section of jsondelta_config.json named after the
    class, holding the config=True traits the class itself declares.
    """

    @classmethod
    def section_defaults(cls):
        "Default values of the traits declared on cls (not inherited)."
        instance = _instances.get(cls)
        if instance is None:
            instance = _instances[cls] = cls()
        return {
            name: getattr(instance, name)
            for name in cls.class_own_traits(config=True)
        }


_instances = {}


def config_search_path():
    "Directories searched for jsondelta_config.json, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def iter_config_files(path):
    """Yield the config loaded from each directory in path.

    Directories are visited in increasing priority, so later configs
    should override earlier ones. Directories without a config file are
    skipped.
    """
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_FILE_NAME, path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    Unless include_none is true, None values delete their keys and
    subdicts left empty are pruned.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def build_config(entrypoint, include_none=False):
    """Effective flat config of an entrypoint.

    Sections are applied from the most generic base class to the
    entrypoint's own class, each as trait defaults overridden by the
    matching section of the config files.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables)))

    disk_config = {}
    for c in iter_config_files(config_search_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, JsonDeltaConfigurable):
            continue
        recursive_update(config, cls.section_defaults(), include_none)
        recursive_update(config, disk_config.get(cls.__name__, {}), include_none)
    return config


class Global(JsonDeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Printing(JsonDeltaConfigurable):

    use_color = Bool(
        True,
        help="use ANSI color code escapes for text output.",
    ).tag(config=True)


class _Diffing(JsonDeltaConfigurable):

    ignore_case = Bool(
        False,
        help="compare strings case-insensitively.",
    ).tag(config=True)

    ignore_whitespace = Bool(
        False,
        help="strip whitespace from strings before comparing them.",
    ).tag(config=True)

    ignore_order = Bool(
        False,
        help="compare arrays without regard to the order of their items.",
    ).tag(config=True)

    include_same = Bool(
        False,
        help="also report values that did not change.",
    ).tag(config=True)

    max_depth = Integer(
        0,
        min=0,
        help="stop comparing below this depth. Default is 0 (unlimited).",
    ).tag(config=True)


class JsonDiff(Global, _Printing, _Diffing):
    pass


class JsonPatch(Global):

    indent = Integer(
        2,
        min=0,
        help="indentation of the patched document when written out.",
    ).tag(config=True)


entrypoint_configurables = {
    'jsondelta-diff': JsonDiff,
    'jsondelta-patch': JsonPatch,
}


class Namespace(object):
    "Attribute access to a dict, standing in for parsed arguments."
    def __init__(self, adict):
        self.__dict__.update(adict)
