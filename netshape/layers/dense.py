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
from .layer import Layer, Parameter, positive_integer

###############################################################################
class Linear(Layer):
	""" A fully-connected layer.

		# Properties

		in_features: int (optional). If given, the feature dimension of the
			input must match it.
		out_features: int (optional). If given, the feature dimension of the
			output. Otherwise, the input shape is passed through unchanged.

		# Example

		```
		type: linear
		params:
		  out_features: 10
		```
	"""

	PARAMETERS = (
		Parameter('in_features'),
		Parameter('out_features')
	)

	###########################################################################
	def __init__(self, in_features=None, out_features=None):
		""" Creates a new linear layer.
		"""
		if in_features is not None:
			in_features = self.validate('in_features', in_features,
				positive_integer)
		if out_features is not None:
			out_features = self.validate('out_features', out_features,
				positive_integer)
		super().__init__(in_features=in_features, out_features=out_features)

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		self.require_rank(input_shape, 2, '(batch_size, features)')
		batch_size, features = input_shape
		if self.in_features is not None and features != self.in_features:
			raise ShapeError('Linear layer expects {} input features but got '
				'{} (input shape {}).'.format(
					self.in_features, features, list(input_shape)))
		if self.out_features is None:
			return input_shape
		return (batch_size, self.out_features)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
