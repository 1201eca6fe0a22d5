import logging
import os

from .constants import PROGNAME, Namespace, cast_boolean
from .error import InvalidConfigurationError

ENV_VAR_PREFIX = PROGNAME.upper() + '_'

logger = logging.getLogger(PROGNAME)


def cast(value, cast_func):
    """
    cast a value to a given type

    Example:
        >>> cast('1', int)
        1
    """
    if cast_func == bool:
        return cast_boolean(value)
    return cast_func(value)


def get_env_variable(arg, default, cast_type=None):
    """
    Args:
        arg (str): the argument/variable name
    Returns:
        the setting from the environment variable if given, otherwise the default value
    """
    if cast_type is None:
        cast_type = type(default)
    result = os.environ.get(ENV_VAR_PREFIX + str(arg).upper(), None)
    if result is not None:
        return cast(result, cast_type)
    return default


class WeakNamespace(Namespace):
    """
    namespace of default settings where every member can be overridden by its environment
    variable equivalent (ex. SPLITALIGN_CLUSTER_WINDOW)
    """

    def _lookup(self, attr):
        return get_env_variable(attr, self._members[attr], self._types[attr])


def check_minimum(defaults, attr, value, minimum):
    """
    check a setting against its lower bound

    Args:
        defaults (WeakNamespace): the namespace defining the setting
        attr (str): name of the setting
        value (int): the value given for the setting
        minimum (int): the smallest allowed value

    Raises:
        InvalidConfigurationError: the value is below the minimum
    """
    if value < minimum:
        raise InvalidConfigurationError(
            '{} must be at least {}: {}'.format(attr, minimum, defaults.define(attr, attr)), value)
    return value


def count_reasons(results):
    """
    tally the decline reasons of a sequence of combine/extract results

    Returns:
        dict of int by str: number of declined results for each reason
    """
    counts = {}
    for result in results:
        if not result:
            counts[result.reason] = counts.get(result.reason, 0) + 1
    return counts
