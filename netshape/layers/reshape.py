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
class Reshape(Layer):
	""" A layer which reinterprets its input with a new shape.

		Unlike Unflatten, the target shape is the complete output shape,
		batch dimension included.

		# Properties

		shape: list of ints (required). The output shape. Its product must
			equal the product of the input shape.

		# Example

		```
		type: reshape
		params:
		  shape: [1, 3, 16, 16]
		```
	"""

	PARAMETERS = (
		Parameter('shape', required=True),
	)

	###########################################################################
	def __init__(self, shape):
		""" Creates a new reshaping layer.
		"""
		super().__init__(shape=self.validate('shape', shape, target_shape))

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		input_elements = product(input_shape)
		target_elements = product(self.shape)
		if input_elements != target_elements:
			raise ShapeError('Cannot reshape tensor of shape {} ({} elements) '
				'into shape {} ({} elements).'.format(
					list(input_shape), input_elements,
					list(self.shape), target_elements
				))
		return self.shape

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
