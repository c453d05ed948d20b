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

import logging

from . import ShapeError
from .layer import Layer, Parameter, positive_integer, non_negative_integer, \
	spatial_pair

logger = logging.getLogger(__name__)

###############################################################################
class SpatialLayer(Layer):
	""" Base class for layers which slide a kernel over the height and width of
		a (batch_size, channels, height, width) input.

		# Properties

		kernel_size: int or list of two ints (required). The size of the
			kernel. A single integer is used for both height and width.
		stride: int or list of two ints (optional). The step between kernel
			applications.
		padding: int or list of two ints (optional; default: 0). Implicit
			zero padding on both sides of each spatial dimension.
	"""

	DEFAULT_STRIDE = 1

	###########################################################################
	@classmethod
	def is_concrete(cls):
		""" SpatialLayer itself cannot be named in a network description.
		"""
		return cls is not SpatialLayer

	###########################################################################
	def __init__(self, kernel_size, stride=None, padding=0, **params):
		""" Validates the kernel parameters.
		"""
		kernel_size = self.validate('kernel_size', kernel_size,
			spatial_pair(positive_integer))
		if stride is None:
			stride = self.default_stride(kernel_size)
		stride = self.validate('stride', stride,
			spatial_pair(positive_integer))
		if padding is None:
			padding = 0
		padding = self.validate('padding', padding,
			spatial_pair(non_negative_integer))
		super().__init__(kernel_size=kernel_size, stride=stride,
			padding=padding, **params)

	###########################################################################
	def default_stride(self, kernel_size):   # pylint: disable=unused-argument
		""" Returns the stride to use when none was given.
		"""
		return self.DEFAULT_STRIDE

	###########################################################################
	def output_size(self, size, dim):
		""" Computes one spatial dimension of the output.

			# Arguments

			size: int. The input size along this dimension.
			dim: int. 0 for height, 1 for width.

			# Return value

			floor((size + 2p - k) / s) + 1, which may be zero or negative.
		"""
		return (size + 2 * self.padding[dim] - self.kernel_size[dim]) \
			// self.stride[dim] + 1

	###########################################################################
	def output_channels(self, channels):
		""" Returns the number of output channels.
		"""
		return channels

	###########################################################################
	def _forward(self, input_shape):
		""" Returns the output shape of this layer for a given input shape.
		"""
		self.require_rank(input_shape, 4,
			'(batch_size, channels, height, width)')
		batch_size, channels, height, width = input_shape

		output_height = self.output_size(height, 0)
		output_width = self.output_size(width, 1)
		logger.trace('%s: spatial output %dx%d from %dx%d.',
			self.get_layer_name(), output_height, output_width, height, width)

		if output_height <= 0 or output_width <= 0:
			raise ShapeError('Invalid output dimensions {}x{} for input {}. '
				'Check kernel size {}, stride {} and padding {} values.'
				.format(
					output_height, output_width, list(input_shape),
					list(self.kernel_size), list(self.stride),
					list(self.padding)
				))

		return (
			batch_size,
			self.output_channels(channels),
			output_height,
			output_width
		)

###############################################################################
class ChannelMixin:                     # pylint: disable=too-few-public-methods
	""" Optional channel bookkeeping shared by the convolutions.

		in_channels: int (optional). If given, the input channel dimension
			must match it.
		out_channels: int (optional). If given, replaces the channel
			dimension of the output.
	"""

	PARAMETERS = (
		Parameter('in_channels'),
		Parameter('out_channels')
	)

	###########################################################################
	def output_channels(self, channels):
		""" Checks the input channels and returns the output channels.
		"""
		if self.in_channels is not None and channels != self.in_channels:
			raise ShapeError('{} layer expects {} input channels but got {}.'
				.format(self.__class__.__name__, self.in_channels, channels))
		if self.out_channels is None:
			return channels
		return self.out_channels

###############################################################################
def channel_params(layer, in_channels, out_channels):
	""" Validates the optional channel parameters of a convolution.
	"""
	if in_channels is not None:
		in_channels = layer.validate('in_channels', in_channels,
			positive_integer)
	if out_channels is not None:
		out_channels = layer.validate('out_channels', out_channels,
			positive_integer)
	return {'in_channels' : in_channels, 'out_channels' : out_channels}

###############################################################################
class Conv2d(ChannelMixin, SpatialLayer):
	""" A two-dimensional convolution.

		Each spatial output dimension is floor((size + 2p - k) / s) + 1.

		# Example

		```
		type: conv2d
		params:
		  kernel_size: 3
		  stride: 1
		  padding: 1
		```
	"""

	PARAMETERS = (
		Parameter('kernel_size', required=True),
		Parameter('stride'),
		Parameter('padding')
	) + ChannelMixin.PARAMETERS

	###########################################################################
	def __init__(self, kernel_size, stride=1, padding=0, in_channels=None,
		out_channels=None):
		""" Creates a new convolution layer.
		"""
		super().__init__(kernel_size, stride, padding,
			**channel_params(self, in_channels, out_channels))

###############################################################################
class TransposeConv2d(ChannelMixin, SpatialLayer):
	""" A two-dimensional transposed convolution (sometimes called a
		deconvolution).

		Each spatial output dimension is (size - 1) * s - 2p + k.
	"""

	PARAMETERS = Conv2d.PARAMETERS

	###########################################################################
	def __init__(self, kernel_size, stride=1, padding=0, in_channels=None,
		out_channels=None):
		""" Creates a new transposed convolution layer.
		"""
		super().__init__(kernel_size, stride, padding,
			**channel_params(self, in_channels, out_channels))

	###########################################################################
	def output_size(self, size, dim):
		""" Computes one spatial dimension of the output.
		"""
		return (size - 1) * self.stride[dim] - 2 * self.padding[dim] \
			+ self.kernel_size[dim]

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
