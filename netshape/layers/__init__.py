"""
Copyright 2016 Deepgram

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

###############################################################################
class ParsingError(Exception):
	""" Base class for errors raised while turning a network description into
		layers.
	"""

###############################################################################
class UnknownLayerTypeError(ParsingError):
	""" Raised when a layer type name does not correspond to any layer.
	"""

###############################################################################
class LayerConstructionError(ParsingError):
	""" Raised when a layer's parameters are missing or invalid.
	"""

###############################################################################
class ShapeError(ValueError):
	""" Raised when a layer cannot accept a given input shape.
	"""

# pylint: disable=wrong-import-position
from .layer import Layer, Parameter
from .dense import Linear
from .convolution import Conv2d, TransposeConv2d
from .pooling import MaxPool2d
from .flatten import Flatten, Unflatten
from .reshape import Reshape
from .dropout import Dropout
from .batchnorm import BatchNorm2d
from .activation import Activation, ReLU, Tanh, LeakyReLU, Sigmoid
# pylint: enable=wrong-import-position

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
