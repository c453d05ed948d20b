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

###############################################################################
def product(values):
	""" Multiplies a sequence of integers together.

		# Arguments

		values: iterable of ints.

		# Return value

		The product, as a Python int. The product of an empty sequence is 1.
	"""
	result = 1
	for x in values:
		result *= x
	return result

###############################################################################
def format_shape(shape):
	""" Formats a shape for display, like "[1, 3, 32, 32]".

		None is formatted as "?", and anything that is not a sequence is
		formatted with `str()`.
	"""
	if shape is None:
		return '?'
	if not isinstance(shape, (list, tuple)):
		return str(shape)
	return '[{}]'.format(', '.join(str(x) for x in shape))

###############################################################################
def parse_shape(text):
	""" Parses a comma-separated shape string, such as "1,3,32,32".

		Surrounding brackets or parentheses and whitespace are ignored.

		# Arguments

		text: str. The text to parse.

		# Return value

		A tuple of ints.

		# Exceptions

		If any entry is not a non-negative integer, or there are no entries at
		all, a ValueError is raised.
	"""
	stripped = text.strip().strip('[]()').strip()
	if not stripped:
		raise ValueError('Empty shape: "{}"'.format(text))
	result = []
	for entry in stripped.split(','):
		entry = entry.strip()
		try:
			value = int(entry)
		except ValueError:
			raise ValueError('Shape entries must be integers. We received '
				'this instead: "{}"'.format(entry))
		if value < 0:
			raise ValueError('Shape entries cannot be negative: {}'
				.format(value))
		result.append(value)
	return tuple(result)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
