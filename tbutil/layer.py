# License: BSD3

"""
Annotation layers: named ways of extracting a value from a token.

A layer is one of a fixed set of kinds (form, lemma, upos, xpos,
features, misc), or a single key of the morphological features or
misc maps (`feature:Case`, `misc:SpaceAfter`). Extracting a layer from a
token gives either a string or None when the token has no such
annotation. None is a value in its own right: it is equal to itself
and different from the empty string and from the `_` placeholder that
is only used when printing.
"""

from collections import namedtuple
from enum import Enum

from .annotation import features_str, misc_str
from .internalutil import TbUtilException


class UnknownLayerError(TbUtilException):
    """
    A layer name we do not know how to extract
    """
    def __init__(self, name):
        super(UnknownLayerError, self).__init__(
            "Unknown layer: {}".format(name))
        self.name = name


class LayerKind(Enum):
    "the different sorts of layer"
    FORM = 'form'
    LEMMA = 'lemma'
    UPOS = 'upos'
    XPOS = 'xpos'
    FEATURES = 'features'
    MISC = 'misc'
    FEATURE_KEY = 'feature_key'
    MISC_KEY = 'misc_key'


FEATURE_PREFIX = 'feature:'
MISC_PREFIX = 'misc:'

# insertion order is the order we list them in --help
LAYERS = {
    'form': LayerKind.FORM,
    'lemma': LayerKind.LEMMA,
    'upos': LayerKind.UPOS,
    'xpos': LayerKind.XPOS,
    'features': LayerKind.FEATURES,
    'misc': LayerKind.MISC,
}
"""
Names of the whole-token layers; keyed layers are written with one of
the prefixes `FEATURE_PREFIX` or `MISC_PREFIX`
"""

KEYED_LAYERS = {
    FEATURE_PREFIX: LayerKind.FEATURE_KEY,
    MISC_PREFIX: LayerKind.MISC_KEY,
}


class Layer(namedtuple('Layer', 'kind key')):
    """
    A layer: its kind, and for the keyed kinds, the feature/misc key
    it looks up
    """
    __slots__ = ()

    def __new__(cls, kind, key=None):
        return super(Layer, cls).__new__(cls, kind, key)

    @property
    def name(self):
        "the name this layer would be resolved from"
        if self.kind == LayerKind.FEATURE_KEY:
            return FEATURE_PREFIX + self.key
        elif self.kind == LayerKind.MISC_KEY:
            return MISC_PREFIX + self.key
        else:
            return self.kind.value

    def __str__(self):
        return self.name


def feature_layer(key):
    "layer for a single morphological feature"
    return Layer(LayerKind.FEATURE_KEY, key)


def misc_layer(key):
    "layer for a single misc feature"
    return Layer(LayerKind.MISC_KEY, key)


def resolve(name):
    """
    Return the layer with the given name, or None if there is no
    such layer
    """
    if name in LAYERS:
        return Layer(LAYERS[name])
    for prefix, kind in KEYED_LAYERS.items():
        if name.startswith(prefix) and len(name) > len(prefix):
            return Layer(kind, name[len(prefix):])
    return None


def parse_layers(names):
    """
    Resolve a comma-separated list of layer names, keeping their order.

    Raises
    ------
    UnknownLayerError
        On the first name that does not correspond to any layer
    """
    layers = []
    for name in names.split(','):
        layer = resolve(name)
        if layer is None:
            raise UnknownLayerError(name)
        layers.append(layer)
    return layers


def extract(layer, token):
    """Value of a layer for a token

    Parameters
    ----------
    layer : Layer
    token : Token

    Returns
    -------
    value : string or None
        None if the token does not have this annotation. Note that the
        `features` and `misc` layers are never None (an empty map gives
        the empty string), and that a misc key present without a value
        counts as absent.
    """
    kind = layer.kind
    if kind == LayerKind.FORM:
        return token.form
    elif kind == LayerKind.LEMMA:
        return token.lemma
    elif kind == LayerKind.UPOS:
        return token.upos
    elif kind == LayerKind.XPOS:
        return token.xpos
    elif kind == LayerKind.FEATURES:
        return features_str(token.features)
    elif kind == LayerKind.MISC:
        return misc_str(token.misc)
    elif kind == LayerKind.FEATURE_KEY:
        return token.features.get(layer.key)
    elif kind == LayerKind.MISC_KEY:
        return token.misc.get(layer.key)
    else:
        raise ValueError("Unknown layer kind: {}".format(kind))
