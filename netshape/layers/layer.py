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

import numbers
import logging

from . import UnknownLayerTypeError, LayerConstructionError, ShapeError
from ..utils import get_subclasses

logger = logging.getLogger(__name__)

###############################################################################
class Parameter:                        # pylint: disable=too-few-public-methods
	""" Declares one parameter that a layer accepts in its parameter mapping.

		# Arguments

		name: str. The constructor keyword (and preferred mapping key).
		required: bool (default: False). If True, the absence of the key (or
			a null value) is a construction error.
		default: object (default: None). The value used when the key is
			absent and the parameter is optional.
		aliases: tuple of str (default: ()). Alternative mapping keys. The
			first key that is present with a non-null value wins.
	"""

	###########################################################################
	def __init__(self, name, required=False, default=None, aliases=()):
		""" Creates a new parameter declaration.
		"""
		self.name = name
		self.required = required
		self.default = default
		self.aliases = tuple(aliases)

	###########################################################################
	def keys(self):
		""" Returns every mapping key that this parameter answers to.
		"""
		return (self.name, ) + self.aliases

	###########################################################################
	def extract(self, layer_name, params):
		""" Pulls the raw value of this parameter out of a parameter mapping.

			# Arguments

			layer_name: str. The name of the layer, used for error messages.
			params: dict. The raw parameter mapping.

			# Return value

			The raw (unvalidated) value, or the default value.

			# Exceptions

			If the parameter is required but missing, a LayerConstructionError
			is raised.
		"""
		for key in self.keys():
			if params.get(key) is not None:
				return params[key]
		if self.required:
			raise LayerConstructionError('Missing required parameter "{}" '
				'for {} layer.'.format(self.name, layer_name))
		return self.default

###############################################################################
def is_integer(value):
	""" Returns True if `value` can stand in for an integer.

		Booleans never count, and floats only count if they are integral.
	"""
	if isinstance(value, bool):
		return False
	if isinstance(value, numbers.Integral):
		return True
	if isinstance(value, float):
		return value.is_integer()
	return False

###############################################################################
def positive_integer(value):
	""" Validates a strictly positive integer.
	"""
	if not is_integer(value) or value <= 0:
		raise ValueError('expected a positive integer, but received: {}'
			.format(value))
	return int(value)

###############################################################################
def non_negative_integer(value):
	""" Validates a non-negative integer.
	"""
	if not is_integer(value) or value < 0:
		raise ValueError('expected a non-negative integer, but received: {}'
			.format(value))
	return int(value)

###############################################################################
def spatial_pair(check):
	""" Creates a validator for a parameter that is either a single integer
		(used for both height and width) or a list of two integers.

		# Arguments

		check: callable. The validator applied to each entry.

		# Return value

		A validator which returns a (height, width) tuple.
	"""
	def validate(value):
		""" Validates an integer or a pair of integers.
		"""
		if isinstance(value, (list, tuple)):
			if len(value) != 2:
				raise ValueError('expected a single integer or a list of two '
					'integers (height, width), but received: {}'.format(value))
			return tuple(check(x) for x in value)
		value = check(value)
		return (value, value)
	return validate

###############################################################################
def target_shape(value):
	""" Validates a non-empty list of positive integers.
	"""
	if not isinstance(value, (list, tuple)) or not value:
		raise ValueError('expected a non-empty list of positive integers, but '
			'received: {}'.format(value))
	for x in value:
		if not is_integer(x) or x <= 0:
			raise ValueError('expected a non-empty list of positive '
				'integers, but received: {}'.format(value))
	return tuple(int(x) for x in value)

###############################################################################
def probability(value):
	""" Validates a probability in the closed interval [0, 1].
	"""
	if isinstance(value, bool) or not isinstance(value, numbers.Real):
		raise ValueError('expected a number, but received: {}'.format(value))
	if not 0 <= value <= 1:
		raise ValueError('probability must be between 0 and 1, but received: '
			'{}'.format(value))
	return float(value)

###############################################################################
def real_number(value):
	""" Validates any real number.
	"""
	if isinstance(value, bool) or not isinstance(value, numbers.Real):
		raise ValueError('expected a number, but received: {}'.format(value))
	return float(value)

###############################################################################
class Layer:
	""" The base class for all layers.

		A layer is an immutable set of parameters plus a pure rule which maps
		an input shape to an output shape. Derived classes validate their
		parameters in `__init__()`, pass them on to `Layer.__init__()`, and
		implement `_forward()`.

		# Creating layers from data

		Layers are usually created by name from a parameter mapping:

		```python
		layer = Layer.create_layer('conv2d', {'kernel_size' : 3})
		layer.forward((1, 3, 32, 32))
		```

		The set of names that `create_layer()` understands is exactly the set
		of concrete `Layer` subclasses, as reported by `get_layer_name()`.
	"""

	# The parameters accepted in a parameter mapping, in constructor order.
	PARAMETERS = ()

	###########################################################################
	@classmethod
	def get_layer_name(cls):
		""" Returns the name of the layer class.

			This is the name used to determine which layer needs to be
			instantiated. It can be overriden in derived classes if the name of
			the class isn't the same as the type used in network descriptions.

			# Return value

			A lower-case string unique to this layer class.
		"""
		return cls.__name__.lower()

	###########################################################################
	@classmethod
	def is_concrete(cls):
		""" Whether or not this class can be instantiated from a network
			description. Intermediate base classes return False.
		"""
		return True

	###########################################################################
	@staticmethod
	def get_all_layers():
		""" Returns all concrete Layer subclasses.
		"""
		for cls in get_subclasses(Layer):
			if cls.is_concrete():
				yield cls

	###########################################################################
	@staticmethod
	def get_layer_names():
		""" Returns the sorted names of all concrete layers.
		"""
		return sorted(cls.get_layer_name() for cls in Layer.get_all_layers())

	###########################################################################
	@staticmethod
	def find_layer_for_name(name):
		""" Finds the layer class corresponding to a type name.

			# Arguments

			name: str. The type name. Matching is case-insensitive.

			# Return value

			The Layer subclass.

			# Exceptions

			If no layer has this name, an UnknownLayerTypeError is raised.
		"""
		if isinstance(name, str):
			key = name.lower()
			for cls in Layer.get_all_layers():
				if cls.get_layer_name() == key:
					return cls
		raise UnknownLayerTypeError('Unknown layer type: "{}". Supported '
			'types are: {}'.format(name, ', '.join(Layer.get_layer_names())))

	###########################################################################
	@staticmethod
	def create_layer(name, params=None):
		""" Factory method for creating layers.

			# Arguments

			name: str. The layer type name (e.g., "conv2d").
			params: dict or None. The raw parameter mapping.

			# Return value

			A new Layer instance.

			# Exceptions

			An UnknownLayerTypeError is raised if the name is unknown, and a
			LayerConstructionError is raised if the parameters are invalid.
		"""
		cls = Layer.find_layer_for_name(name)
		layer = cls.from_params(params)
		logger.debug('Created layer: %r', layer)
		return layer

	###########################################################################
	@classmethod
	def from_params(cls, params=None):
		""" Creates a new layer of this class from a raw parameter mapping.
		"""
		name = cls.get_layer_name()
		if params is None:
			params = {}
		if not isinstance(params, dict):
			raise LayerConstructionError('Parameters for {} layer must be a '
				'mapping, but received: {}'.format(name, params))

		known = set()
		kwargs = {}
		for param in cls.PARAMETERS:
			known.update(param.keys())
			kwargs[param.name] = param.extract(name, params)

		for key in params:
			if key not in known:
				logger.warning('Ignoring unknown parameter "%s" for %s layer.',
					key, name)

		return cls(**kwargs)

	###########################################################################
	def __init__(self, **params):
		""" Stores the (already validated) parameters and freezes the layer.
		"""
		for key, value in params.items():
			object.__setattr__(self, key, value)
		object.__setattr__(self, '_params', tuple(params))

	###########################################################################
	def __setattr__(self, key, value):
		raise AttributeError('Layer parameters cannot be changed after '
			'construction ({}.{}).'.format(self.get_layer_name(), key))

	###########################################################################
	def __delattr__(self, key):
		raise AttributeError('Layer parameters cannot be removed after '
			'construction ({}.{}).'.format(self.get_layer_name(), key))

	###########################################################################
	def get_params(self):
		""" Returns the validated parameters as a new dictionary.
		"""
		return {key : getattr(self, key) for key in self._params}

	###########################################################################
	def __str__(self):
		""" Return a string representation.

			This uses the layer's type name in the representation.
		"""
		return self.get_layer_name()

	###########################################################################
	def __repr__(self):
		""" Return a string representation.

			This uses the layer's class name and parameters.
		"""
		return '{type}({params})'.format(
			type=self.__class__.__name__,
			params=', '.join(
				'{}={!r}'.format(key, getattr(self, key))
				for key in self._params
			)
		)

	###########################################################################
	def __eq__(self, other):
		if not isinstance(other, Layer):
			return NotImplemented
		return type(self) is type(other) \
			and self.get_params() == other.get_params()

	###########################################################################
	def __hash__(self):
		return hash((type(self), tuple(sorted(self.get_params().items()))))

	###########################################################################
	@classmethod
	def validate(cls, key, value, check):
		""" Runs a validator over a parameter value.

			# Arguments

			key: str. The parameter name, used in error messages.
			value: object. The raw value.
			check: callable. A validator which returns the normalized value or
				raises ValueError/TypeError.

			# Return value

			The normalized value.

			# Exceptions

			A LayerConstructionError is raised if validation fails.
		"""
		try:
			return check(value)
		except (TypeError, ValueError) as exc:
			raise LayerConstructionError('Bad value for "{}" in {} layer: {}'
				.format(key, cls.get_layer_name(), exc))

	###########################################################################
	def forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.

			This should not be overriden in derived classes. Override
			`_forward()` instead.

			# Arguments

			input_shape: sequence of ints. The full input shape, including the
				batch dimension.

			# Return value

			A new tuple with the output shape.

			# Exceptions

			A ShapeError is raised if the layer cannot accept the input shape.
		"""
		if not isinstance(input_shape, (list, tuple)) or \
			not all(is_integer(x) and x >= 0 for x in input_shape):
			raise ShapeError('Invalid input shape {}: a shape must be a list '
				'of non-negative integers.'.format(input_shape))
		return tuple(self._forward(tuple(int(x) for x in input_shape)))

	###########################################################################
	def _forward(self, input_shape):
		""" Computes the output shape.

			This should be overriden in derived classes. `input_shape` is
			always a tuple of non-negative ints.
		"""
		raise NotImplementedError

	###########################################################################
	def require_rank(self, input_shape, rank, description):
		""" Raises a ShapeError unless the input has exactly `rank` dimensions.
		"""
		if len(input_shape) != rank:
			raise ShapeError('{} layer expects exactly {} input dimensions '
				'{}, but received shape {} with {} dimensions.'.format(
					self.__class__.__name__, rank, description,
					list(input_shape), len(input_shape)
				))

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
