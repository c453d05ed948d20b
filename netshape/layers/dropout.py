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

from .layer import Layer, Parameter, probability

###############################################################################
class Dropout(Layer):
	""" A dropout layer. It never changes the shape.

		# Properties

		p: float (optional; default: 0.5). The probability of zeroing an
			element, in [0, 1].
	"""

	DEFAULT_PROBABILITY = 0.5

	PARAMETERS = (
		Parameter('p', default=DEFAULT_PROBABILITY, aliases=('probability', )),
	)

	###########################################################################
	def __init__(self, p=DEFAULT_PROBABILITY):
		""" Creates a new dropout layer.
		"""
		super().__init__(p=self.validate('p', p, probability))

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		return input_shape

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
