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

from .layer import Parameter
from .convolution import SpatialLayer

###############################################################################
class MaxPool2d(SpatialLayer):
	""" A two-dimensional max-pooling layer.

		The output arithmetic is the same as for a convolution, but the
		stride defaults to the kernel size and the channels never change.

		# Example

		```
		type: maxpool2d
		params:
		  kernel_size: 2
		```
	"""

	PARAMETERS = (
		Parameter('kernel_size', required=True),
		Parameter('stride'),
		Parameter('padding')
	)

	###########################################################################
	def __init__(self, kernel_size, stride=None, padding=0):
		""" Creates a new pooling layer.
		"""
		super().__init__(kernel_size, stride, padding)

	###########################################################################
	def default_stride(self, kernel_size):
		""" Pooling windows do not overlap unless asked to.
		"""
		return kernel_size

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
