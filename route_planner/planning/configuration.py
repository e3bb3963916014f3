"Contains the configuration object that can be passed to the planner, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, Optional, Union


class Config(NamedTuple):
    """A config object that provides all settings that influence the planner's behaviour

    Customize the values where the default won't fit you:

        >>> myconfig = Config(frontier="heap", goal_tolerance=0.0)
    """

    #: Query points are multiplied by this factor before they are looked up on the map.
    #: The default turns percentages (0 to 100) into normalized map coordinates.
    coordinate_scale: float = 0.01
    #: Which open list implementation the search uses.
    #:
    #: "sorted" sorts a plain list before every extraction, "heap" keeps a binary heap.
    #: Both hand out nodes in the same order.
    frontier: str = "sorted"
    #: Goal test of the search.
    #:
    #: With None, the search stops only at the end node itself. A number makes every node
    #: within this straight-line distance of the end node count as goal. It is given in
    #: normalized map units; 0.0 accepts nodes sitting exactly on the end node's position.
    goal_tolerance: Optional[float] = None
    #: When True, discovered nodes are re-opened if a cheaper route to them is found.
    #: By default, a node keeps the route on which it was discovered first.
    relax_costs: bool = False


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Keys missing in the source keep their default value.

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object
    """
    file_open = None
    opened_source = source
    if isinstance(opened_source, str):
        opened_source = open(source, "r")
        file_open = opened_source
    if isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if file_open is not None:
        file_open.close()
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    return DEFAULT_CONFIG._replace(
        **{key: value for (key, value) in opened_source.items() if key in Config._fields}
    )


NoneType: object = type(None)


def save_config(config: Config, dest: Union[str, TextIOBase, NoneType] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    if dest is None:
        return dict(config._asdict())
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            # Call the TextIOBase code path
            save_config(config, filepointer)
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(save_config(config)))
    else:
        raise TypeError("`dest` has to be a valid destination")
