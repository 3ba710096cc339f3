import os
import importlib.util
import Denv
import Errors


def resolve_path(package_path) -> str:
	filename, extension = os.path.splitext(package_path)
	if extension == "":
		package_path += ".py"
	return os.path.abspath(package_path)


def load_package(package_path) -> Denv.Package:
	if os.path.isdir(package_path):
		raise Errors.CGenError(f"Specified a directory but expected a package script. Given '{package_path}'")

	path = resolve_path(package_path)
	if not os.path.exists(path):
		raise Errors.CGenError(f"No such package script {path}")

	spec = importlib.util.spec_from_file_location(path, path)
	module = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(module)

	if not callable(getattr(module, "get_package", None)):
		raise Errors.CGenError(f"Package script {path} does not define get_package()")

	package = module.get_package()
	if not isinstance(package, Denv.Package):
		raise Errors.CGenError(f"get_package() in {path} did not return a package")
	return package
