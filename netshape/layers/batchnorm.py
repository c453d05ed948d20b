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
class BatchNorm2d(Layer):
	""" A batch normalization over the channels of a 4D input.

		# Properties

		num_features: int (required). The number of channels. The key `shape`
			is accepted as well.
	"""

	PARAMETERS = (
		Parameter('num_features', required=True, aliases=('shape', )),
	)

	###########################################################################
	def __init__(self, num_features):
		""" Creates a new batch normalization layer.
		"""
		super().__init__(num_features=self.validate('num_features',
			num_features, positive_integer))

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		self.require_rank(input_shape, 4,
			'(batch_size, channels, height, width)')
		channels = input_shape[1]
		if channels != self.num_features:
			raise ShapeError('BatchNorm2d layer expected {} channels but got '
				'{} (input shape {}).'.format(
					self.num_features, channels, list(input_shape)))
		return input_shape

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
