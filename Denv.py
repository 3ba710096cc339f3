import os
from enum import Enum


class ProjectType(Enum):
	LIBRARY = "library"
	UNITTEST = "unittest"


class Project:
	def __init__(self, name: str, path: str, project_type: ProjectType):
		self.name = name
		"""Target name"""
		self.path = path
		"""Repository path identifier, e.g. github.com\\user\\repo"""
		self.type = project_type
		self.dependencies = []
		"""Link dependencies, owned by their own packages"""
		self.source_dirs = []
		self.include_dirs = []
		self.defines = []

	def is_library(self) -> bool:
		return self.type == ProjectType.LIBRARY

	def is_unittest(self) -> bool:
		return self.type == ProjectType.UNITTEST

	def relative_dir(self) -> str:
		return os.path.join(*self.path.replace("\\", "/").split("/"))

	def __eq__(self, other):
		if not isinstance(other, Project):
			return NotImplemented
		return (
			self.name == other.name
			and self.path == other.path
			and self.type == other.type
			and self.source_dirs == other.source_dirs
			and self.include_dirs == other.include_dirs
			and self.defines == other.defines
			and self.dependencies == other.dependencies
		)

	def __hash__(self):
		return hash((self.name, self.path, self.type))

	def __repr__(self):
		return f"Project({self.name!r}, {self.type.value})"


class Package:
	def __init__(self, name: str):
		self.name = name
		self.packages = []
		"""Packages this one depends on, in registration order"""
		self.mainlib = None
		self.unittests = []

	def add_package(self, package):
		self.packages.append(package)

	def add_main_lib(self, project: Project):
		self.mainlib = project

	def add_unittest(self, project: Project):
		self.unittests.append(project)

	def get_main_lib(self):
		return self.mainlib

	def get_unittest(self):
		return self.unittests[0] if self.unittests else None

	def __eq__(self, other):
		if not isinstance(other, Package):
			return NotImplemented
		return (
			self.name == other.name
			and [pkg.name for pkg in self.packages] == [pkg.name for pkg in other.packages]
			and self.mainlib == other.mainlib
			and self.unittests == other.unittests
		)

	def __hash__(self):
		return hash(self.name)

	def __repr__(self):
		return f"Package({self.name!r})"


def setup_default_cpp_lib_project(name: str, path: str) -> Project:
	project = Project(name, path, ProjectType.LIBRARY)
	project.source_dirs = [os.path.join("source", "main", "cpp")]
	project.include_dirs = [os.path.join("source", "main", "include")]
	return project


def setup_default_cpp_test_project(name: str, path: str) -> Project:
	project = Project(name, path, ProjectType.UNITTEST)
	project.source_dirs = [os.path.join("source", "test", "cpp")]
	project.include_dirs = [os.path.join("source", "test", "include"), os.path.join("source", "main", "include")]
	project.defines = ["TARGET_TEST"]
	return project


def collect_projects(package: Package) -> list:
	"""Projects reachable from the package targets, dependencies first, each once."""
	ordered = []
	visited = set()

	def visit(project):
		if id(project) in visited:
			return
		visited.add(id(project))
		for dep in project.dependencies:
			visit(dep)
		ordered.append(project)

	roots = ([package.mainlib] if package.mainlib else []) + package.unittests
	for root in roots:
		visit(root)
	return ordered
