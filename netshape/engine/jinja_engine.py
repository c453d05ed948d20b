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

import ast
import logging

import jinja2

from .engine import Engine
from ..utils import product

logger = logging.getLogger(__name__)

###############################################################################
def ternary(value, result_true, result_false):
	""" Jinja2 filter implementing a ternary if/else conditional.
	"""
	return result_true if value else result_false

###############################################################################
class JinjaEngine(Engine):
	""" An evaluation engine which uses Jinja2 for templating.

		Parameter values such as `"{{ channels * 2 }}"` are rendered against
		the variables in scope and then converted back into Python literals,
		so that `"{{ [size, size] }}"` becomes a real list.

		Undefined variables are errors rather than empty strings.
	"""

	###########################################################################
	def register_custom_filters(self, env):
		""" Adds our custom filters to the Jinja2 environment.

			# Arguments

			env: jinja2.Environment instance. The environment to add the
				custom filters to.
		"""
		env.filters['product'] = product
		env.filters['ternary'] = ternary

	###########################################################################
	def __init__(self, *args, **kwargs):
		""" Creates a new Jinja2 templating engine.
		"""
		super().__init__(*args, **kwargs)
		self.env = jinja2.Environment(undefined=jinja2.StrictUndefined)
		self.register_custom_filters(self.env)

	###########################################################################
	def _evaluate(self, expression):
		""" Evaluates an expression in the current scope.

			# Arguments

			expression: str. The string to evaluate.

			# Return value

			The evaluated expression (some Python object).

			# Exceptions

			Template syntax errors, undefined variables and errors raised
			while rendering (such as division by zero) are raised as ValueError.
		"""
		if isinstance(expression, bytes):
			expression = expression.decode('utf-8')

		try:
			result = self.env.from_string(expression).render(**self._scope)
		except Exception as exc:			# pylint: disable=broad-except
			raise ValueError('Failed to evaluate template "{}": {}'
				.format(expression, exc)) from exc

		# `render()` always produces a string. Lists and numbers are printed
		# as valid Python literals, so `ast.literal_eval()` turns them back
		# into Python objects. Anything else stays a string.
		try:
			result = ast.literal_eval(result)
		except (ValueError, SyntaxError):
			pass

		logger.trace('Evaluated "%s" to: %r', expression, result)
		return result

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
