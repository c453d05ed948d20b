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

from .layer import Layer, Parameter, real_number

###############################################################################
class Activation(Layer):
	""" Base class for element-wise activations, which never change the shape
		and never fail.
	"""

	###########################################################################
	@classmethod
	def is_concrete(cls):
		""" Only the specific activations can be named.
		"""
		return cls is not Activation

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		return input_shape

###############################################################################
class ReLU(Activation):
	""" Rectified linear unit.
	"""

###############################################################################
class Tanh(Activation):
	""" Hyperbolic tangent.
	"""

###############################################################################
class Sigmoid(Activation):
	""" Logistic sigmoid.
	"""

###############################################################################
class LeakyReLU(Activation):
	""" Leaky rectified linear unit.

		# Properties

		negative_slope: float (optional; default: 0.01).
	"""

	DEFAULT_NEGATIVE_SLOPE = 0.01

	PARAMETERS = (
		Parameter('negative_slope', default=DEFAULT_NEGATIVE_SLOPE),
	)

	###########################################################################
	def __init__(self, negative_slope=DEFAULT_NEGATIVE_SLOPE):
		super().__init__(negative_slope=self.validate('negative_slope',
			negative_slope, real_number))

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
