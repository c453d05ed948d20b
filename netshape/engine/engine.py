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

from collections import ChainMap
import logging

logger = logging.getLogger(__name__)

###############################################################################
class ScopeStack:                   # pylint: disable=too-few-public-methods
	""" Context management for Engine scopes.

		# Example

		```python
		engine = JinjaEngine()
		with ScopeStack(engine, {'channels' : 16}):
			engine.evaluate('{{ channels * 2 }}')
		```
	"""

	###########################################################################
	def __init__(self, engine, scope):
		""" Creates a new scope stack.

			# Arguments

			engine: Engine instance. The engine to manage scope for.
			scope: dictionary or list of dictionaries. The scope(s) to add to
				the engine's scope stack during context management.
		"""
		self.engine = engine
		if not isinstance(scope, (list, tuple)):
			scope = [scope]
		self.scope = scope

	###########################################################################
	def __enter__(self):
		""" Enter context management and add scopes to the engine.
		"""
		for scope in self.scope:
			self.engine.scope(**scope)
		return self.engine

	###########################################################################
	def __exit__(self, exc_type, exc_value, traceback):
		""" Leave context management and pop the scopes.
		"""
		for _ in self.scope:
			self.engine.scope_pop()

###############################################################################
class Engine:
	""" Base class for all template engines.

		An engine evaluates the parameter values of a network description
		against a stack of variable scopes.
	"""

	###########################################################################
	def __init__(self):
		""" Creates a new engine with an empty scope.
		"""
		self._scope = ChainMap()

	###########################################################################
	def scope(self, **kwargs):
		""" Create an additional scope.

			# Arguments

			kwargs: dict. The key/value scope to augment the current scope
				with.

			# Return value

			Returns the current instance (self), so that it can be used with
			context management:

			```python
			with engine.scope(kernel=3):
				engine.evaluate(...)
			```
		"""
		self._scope = self._scope.new_child(kwargs)
		return self

	###########################################################################
	def scope_pop(self):
		""" Removes the most recent scope.
		"""
		self._scope = self._scope.parents

	###########################################################################
	def variables(self):
		""" Returns a flattened copy of all variables currently in scope.
		"""
		return dict(self._scope)

	###########################################################################
	def __enter__(self):
		""" Enter context management.
		"""
		return self

	###########################################################################
	def __exit__(self, exc_type, exc_value, traceback):
		""" Exit context management, popping the most recent scope.
		"""
		self.scope_pop()

	###########################################################################
	def evaluate(self, expression, recursive=False):
		""" Evaluates an expression in the current scope.

			# Arguments

			expression: object. The object to evaluate. If it is a string, it
				is evaluated for template substitution and returned.
				Otherwise, the behavior depends on `recursive`. If `recursive`
				is True, then container types (dict, list, tuple) are
				recursively evaluated, preserving their structure. If
				`recursive` is False, or if the expression is not a container
				type, the expression is returned unchanged.
			recursive: bool (default: False).

			# Return value

			The evaluated expression (some Python object).

			# Exceptions

			If a template cannot be evaluated, a ValueError is raised.
		"""
		if isinstance(expression, (str, bytes)):
			return self._evaluate(expression)
		elif recursive:
			if isinstance(expression, dict):
				return {k : self.evaluate(v, recursive=recursive)
					for k, v in expression.items()}
			elif isinstance(expression, list):
				return [self.evaluate(x, recursive=recursive)
					for x in expression]
			elif isinstance(expression, tuple):
				return tuple(self.evaluate(x, recursive=recursive)
					for x in expression)
		return expression

	###########################################################################
	def _evaluate(self, expression):
		""" Evaluates a string expression in the current scope.

			This should be overriden in derived classes.
		"""
		raise NotImplementedError

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
