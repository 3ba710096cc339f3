import os
import json
import Denv
import Errors
import GeneratorConfig

SOURCE_EXTENSIONS = [".cpp", ".cc", ".c"]
HEADER_EXTENSIONS = [".h", ".hpp"]

CLANG_FORMAT = """BasedOnStyle: Microsoft
IndentWidth: 4
TabWidth: 4
UseTab: Never
ColumnLimit: 0
PointerAlignment: Left
AlignConsecutiveAssignments: true
AlignConsecutiveDeclarations: true
SortIncludes: false
"""


class GeneratorError(Exception):
	def __init__(self, message):
		super().__init__(message)


class GeneratorContext:
	def __init__(self, directory, config, writer):
		self.directory = directory
		"""Package directory, generated files are relative to it"""
		self.config = config
		self.writer = writer
		self.workspace = os.path.normpath(os.path.join(directory, config.workspace))
		"""Root that project path identifiers are resolved against"""

	def output_dir(self) -> str:
		return os.path.join(self.directory, self.config.output_directory, self.writer.name)

	def project_dir(self, project: Denv.Project) -> str:
		return os.path.join(self.workspace, project.relative_dir())


def find_files(directory: str, extensions: list) -> list:
	file_list = []
	for root, dirs, files in os.walk(directory):
		for file in files:
			if any(file.endswith(ext) for ext in extensions):
				file_list.append(os.path.join(root, file))
	return sorted(file_list)


def project_files(context: GeneratorContext, project: Denv.Project) -> (list, list, list):
	project_dir = context.project_dir(project)
	sources, headers = [], []
	for source_dir in project.source_dirs:
		sources += find_files(os.path.join(project_dir, source_dir), SOURCE_EXTENSIONS)
	include_dirs = [os.path.join(project_dir, include_dir) for include_dir in project.include_dirs]
	for include_dir in include_dirs:
		headers += find_files(include_dir, HEADER_EXTENSIONS)
	return sources, headers, include_dirs


def cmake_path(path) -> str:
	return path.replace("\\", "/")


def write_file(path, content):
	if not os.path.exists(os.path.dirname(path)):
		os.makedirs(os.path.dirname(path))
	with open(path, "w") as f:
		f.write(content)


class Writer:
	def __init__(self):
		self.name = None

	def write(self, context: GeneratorContext, package: Denv.Package) -> list:
		pass


class CMakeWriter(Writer):

	def __init__(self):
		super().__init__()
		self.name = "cmake"

	def project_block(self, context, project) -> list:
		sources, headers, include_dirs = project_files(context, project)
		if not sources:
			raise GeneratorError(f"No sources found for target '{project.name}' in {context.project_dir(project)}")
		files = [f"\"{cmake_path(f)}\"" for f in sources + headers]

		lines = []
		if project.is_library():
			lines.append(f"add_library({' '.join([project.name, 'STATIC'] + files)})")
			visibility = "PUBLIC"
		else:
			lines.append(f"add_executable({' '.join([project.name] + files)})")
			visibility = "PRIVATE"

		if include_dirs:
			includes = " ".join(f"\"{cmake_path(d)}\"" for d in include_dirs)
			lines.append(f"target_include_directories({project.name} {visibility} {includes})")
		if project.defines:
			lines.append(f"target_compile_definitions({project.name} PRIVATE {' '.join(project.defines)})")
		if project.dependencies:
			deps = " ".join(dep.name for dep in project.dependencies)
			lines.append(f"target_link_libraries({project.name} PUBLIC {deps})")
		if project.is_unittest():
			lines.append(f"add_test(NAME {project.name} COMMAND {project.name})")
		return lines

	def write(self, context, package):
		lines = [
			"cmake_minimum_required(VERSION 3.14)",
			f"project({package.name} CXX)",
			"",
			f"set(CMAKE_CXX_STANDARD {context.config.cxx_standard()})",
			"set(CMAKE_CXX_STANDARD_REQUIRED ON)",
			"enable_testing()",
		]
		for project in Denv.collect_projects(package):
			lines.append("")
			lines.extend(self.project_block(context, project))

		output = os.path.join(context.output_dir(), "CMakeLists.txt")
		write_file(output, "\n".join(lines) + "\n")
		return [output]


class JsonWriter(Writer):

	def __init__(self):
		super().__init__()
		self.name = "json"

	def describe_project(self, context, project) -> dict:
		sources, headers, include_dirs = project_files(context, project)
		return {
			"name": project.name,
			"path": project.path,
			"type": project.type.value,
			"dependencies": [dep.name for dep in project.dependencies],
			"defines": project.defines,
			"include_dirs": include_dirs,
			"sources": sources,
			"headers": headers,
		}

	def write(self, context, package):
		description = {
			"name": package.name,
			"packages": [pkg.name for pkg in package.packages],
			"mainlib": package.mainlib.name if package.mainlib else None,
			"unittests": [test.name for test in package.unittests],
			"projects": [self.describe_project(context, project) for project in Denv.collect_projects(package)],
		}

		output = os.path.join(context.output_dir(), package.name + ".json")
		write_file(output, json.dumps(description, indent=2) + "\n")
		return [output]


global_writers = [CMakeWriter(), JsonWriter()]


def get(config) -> Writer:
	for writer in global_writers:
		if writer.name == config.dev:
			return writer
	raise GeneratorError(f"Specified dev target '{config.dev}' is not recognized")


def init(directory=None, config_name="default") -> GeneratorContext:
	directory = os.path.abspath(directory or os.getcwd())
	config = GeneratorConfig.get_config(directory, config_name)
	return GeneratorContext(directory, config, get(config))


def generate_files(context: GeneratorContext) -> list:
	gitignore = "\n".join([f"/{context.config.output_directory}/", "*.o", "*.a", "*.lib", "*.exe", ""])
	written = []
	for name, content in [(".gitignore", gitignore), (".clang-format", CLANG_FORMAT)]:
		path = os.path.join(context.directory, name)
		if os.path.exists(path):
			Errors.log(f"Keeping existing {name}", 1)
			continue
		write_file(path, content)
		Errors.log(name, 0)
		written.append(path)
	return written


def generate(context: GeneratorContext, package: Denv.Package) -> list:
	Errors.title(f"Generating '{package.name}' ({context.writer.name})")
	for project in Denv.collect_projects(package):
		if not os.path.isdir(context.project_dir(project)):
			Errors.warn(f"Directory of '{project.name}' not found at {context.project_dir(project)}")

	written = context.writer.write(context, package)
	for path in written:
		Errors.log(os.path.relpath(path, context.directory), 0)
	return written
