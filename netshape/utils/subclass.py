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
def get_subclasses(cls, recursive=True):
	""" Enumerates all subclasses of a given class.

		# Arguments

		cls: class. The class to enumerate subclasses for.
		recursive: bool (default: True). If True, recursively finds all
			sub-classes.

		# Return value

		A list of subclasses of `cls`, in definition order, each listed
		once even when reachable through several bases.
	"""
	result = []
	pending = list(cls.__subclasses__())
	while pending:
		sub = pending.pop(0)
		if sub in result:
			continue
		result.append(sub)
		if recursive:
			pending.extend(sub.__subclasses__())
	return result

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
