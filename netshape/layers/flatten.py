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

from . import ShapeError
from .layer import Layer, Parameter, target_shape
from ..utils import product

###############################################################################
class Flatten(Layer):
	""" A layer which flattens everything but the batch dimension.
	"""

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		if len(input_shape) < 2:
			raise ShapeError('Flatten layer needs at least two input '
				'dimensions (batch_size, *), but received shape {}.'
				.format(list(input_shape)))
		return (input_shape[0], product(input_shape[1:]))

###############################################################################
class Unflatten(Layer):
	""" The inverse of Flatten: expands a (batch_size, features) input into
		(batch_size, *shape).

		# Properties

		shape: list of ints (required). The target dimensions, excluding the
			batch size. Their product must equal the number of features.
	"""

	PARAMETERS = (
		Parameter('shape', required=True, aliases=('target_shape', )),
	)

	###########################################################################
	def __init__(self, shape):
		""" Creates a new unflattening layer.
		"""
		super().__init__(shape=self.validate('shape', shape, target_shape))

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		self.require_rank(input_shape, 2, '(batch_size, flattened_dim)')
		batch_size, flattened_dim = input_shape
		expected = product(self.shape)
		if flattened_dim != expected:
			raise ShapeError('Cannot unflatten tensor of size {} into shape {}. '
				'Flattened dimension {} does not match product of target '
				'dimensions {}.'.format(
					list(input_shape), [batch_size] + list(self.shape),
					flattened_dim, expected
				))
		return (batch_size, ) + self.shape

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
