import json
import os
import Errors


class GeneratorProperties:

	interface = {
		"dev": ["cmake", "json"],
		"std": ["11", "14", "17", "20", "latest"],
		"arch": ["x64", "arm64"],
		"workspace": [],
		"output_directory": [],
	}

	free_options = {"workspace", "output_directory"}

	def __init__(self):
		self.name = "default"
		"""Configuration ID"""
		self.dev = "cmake"
		"""Build description format to emit"""
		self.std = "17"
		"""C++ language standard"""
		self.arch = "x64"
		"""Target architecture"""
		self.workspace = os.path.join("..", "..", "..")
		"""Root that holds github.com/<user>/<repo>, relative to the package directory"""
		self.output_directory = "target"
		"""Where generated files go, relative to the package directory"""

	def load(self, absolute_directory_path, name):
		config_path = os.path.join(absolute_directory_path, name + ".json")
		if not os.path.exists(config_path):
			raise Errors.CGenError(f"Configuration file '{config_path}' does not exist")
		with open(config_path) as f:
			try:
				config = json.load(f)
			except json.JSONDecodeError as error:
				raise Errors.CGenError(f"Malformed configuration '{config_path}': {error}")
		if not isinstance(config, dict):
			raise Errors.CGenError(f"Malformed configuration '{config_path}': expected a JSON object")

		for option in self.interface.keys() - self.free_options:
			value = config.get(option)
			if not value:
				raise Errors.CGenError(f"Missing required option '{option}' in '{config_path}'")
			if value not in self.interface[option]:
				raise Errors.CGenError(f"Invalid value '{value}' for option '{option}' in '{config_path}'")

		for option in self.free_options:
			value = config.get(option, getattr(self, option))
			if not isinstance(value, str) or not value:
				raise Errors.CGenError(f"Invalid value for '{option}' in '{config_path}' - must be a non-empty string")
			setattr(self, option, value)

		self.name = name
		self.dev = config["dev"]
		self.std = config["std"]
		self.arch = config["arch"]

		return True

	def read(self):
		for option in self.interface:
			default = getattr(self, option)
			if option in self.free_options:
				value = input(f"{option} (default {default}): ")
				setattr(self, option, value or default)
				continue
			valid_values = self.interface[option]
			value = input(f"{option} ({', '.join(valid_values)}, default {default}): ")
			if not value:
				continue
			while value not in valid_values:
				value = input(f"Invalid value for {option}. Please enter a valid value : ")
			setattr(self, option, value)

	def save(self, absolute_directory_path, config_name):
		self.name = config_name
		file_path = os.path.join(absolute_directory_path, config_name + ".json")
		with open(file_path, 'w') as file:
			json.dump(vars(self), file, indent=2)
		return file_path

	def cxx_standard(self) -> str:
		return "20" if self.std == "latest" else self.std


def get_config(directory, name) -> GeneratorProperties:
	config = GeneratorProperties()
	if os.path.exists(os.path.join(directory, name + ".json")):
		config.load(directory, name)
	else:
		Errors.log(f"No configuration '{name}' in {directory}, using defaults", 1)
		config.name = name
	return config
