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
from collections import namedtuple

from .utils import format_shape

logger = logging.getLogger(__name__)

# The result of applying one layer to one input shape. `output_shape` is set
# only on success, and `error` only on failure.
ForwardStep = namedtuple('ForwardStep',
	['layer', 'input_shape', 'output_shape', 'success', 'error']
)

###############################################################################
def forward(layers, input_shape, chain=False):
	""" Simulates a forward pass through a sequence of layers.

		# Arguments

		layers: iterable of Layer instances.
		input_shape: sequence of ints. The shape fed to the network.
		chain: bool (default: False). If False, every layer is evaluated
			against `input_shape` itself. If True, each layer receives the
			output of the previous layer; once a layer fails, all later
			layers are reported as failed without being evaluated.

		# Return value

		A list of ForwardStep tuples, exactly one per layer, in order.

		# Notes

		- Layer failures never propagate. Whatever a layer raises is recorded
		  as the error of its own step, and the remaining layers are still
		  processed.
	"""
	if isinstance(input_shape, list):
		input_shape = tuple(input_shape)

	steps = []
	current = input_shape
	failed = None
	for index, layer in enumerate(layers):

		if failed is not None:
			steps.append(ForwardStep(layer, None, None, False,
				'Not evaluated: layer #{} ({}) failed, so there is no input '
				'shape.'.format(failed, steps[failed].layer)))
			continue

		try:
			output_shape = layer.forward(current)
		except Exception as exc:                # pylint: disable=broad-except
			error = str(exc) or type(exc).__name__
			logger.debug('Layer #%d (%s): %s -> error: %s', index, layer,
				format_shape(current), error)
			steps.append(ForwardStep(layer, current, None, False, error))
			if chain:
				failed = index
			continue

		logger.debug('Layer #%d (%s): %s -> %s', index, layer,
			format_shape(current), format_shape(output_shape))
		steps.append(ForwardStep(layer, current, output_shape, True, None))
		if chain:
			current = output_shape

	return steps

###############################################################################
def summarize(steps):
	""" Renders forward steps as text, one line per step:
		"<input shape> -> <layer> -> <output shape or error>".
	"""
	lines = []
	for step in steps:
		lines.append('{} -> {} -> {}'.format(
			format_shape(step.input_shape),
			step.layer,
			format_shape(step.output_shape) if step.success
				else 'ERROR: {}'.format(step.error)
		))
	return lines

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
