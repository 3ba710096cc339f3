import os
import sys
import Denv
import Errors
import Generator
import GeneratorConfig
import PackageLoader

default_package_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "cpackages", "cgfxcommon.py")


def generate_cmd(args):
	package = PackageLoader.load_package(args["package-path"])
	context = Generator.init(os.getcwd(), args["cfg"])
	Generator.generate_files(context)
	Generator.generate(context, package)


def files_cmd(args):
	Generator.generate_files(Generator.init(os.getcwd(), args["cfg"]))


def configure_cmd(args):
	cfg = GeneratorConfig.GeneratorProperties()
	cfg.read()
	name = input("Configuration name:")
	if not name:
		raise Errors.CGenError("Configuration name must not be empty")
	Errors.log(cfg.save(os.path.abspath(args["directory"]), name), 0)


def describe_package(package: Denv.Package) -> str:
	out = f"{package.name}\n"
	out += f"\tpackages : {', '.join(pkg.name for pkg in package.packages) or '-'}\n"
	for project in Denv.collect_projects(package):
		deps = ", ".join(dep.name for dep in project.dependencies) or "-"
		out += f"\t{project.type.value} {project.name} ({project.path}) -> {deps}\n"
	return out


def show_cmd(args):
	Errors.log(describe_package(PackageLoader.load_package(args["package-path"])), 0)


commands = {
	"generate": {"exec": generate_cmd, "args": {"package-path": default_package_path, "cfg": "default"}},
	"files": {"exec": files_cmd, "args": {"cfg": "default"}},
	"configure": {"exec": configure_cmd, "args": {"directory": "."}},
	"show": {"exec": show_cmd, "args": {"package-path": default_package_path}},
}

command_macros = {
	"generate": ["g", "gen"],
	"files": ["f"],
	"configure": ["cfg", "config"],
	"show": ["s", "list"],
}


def command_descr(cmd_name, cmd) -> str:
	args = cmd['args']
	out = f"{cmd_name} {command_macros[cmd_name]}:\n"
	if args:
		for arg_name, arg_val in args.items():
			default_val = str(arg_val) if arg_val is not None else "(required)"
			out += f"\t{arg_name} : {default_val}\n"
	else:
		out += "\tNo arguments\n"
	return out


def commands_descr() -> str:
	out = "Commands:\n"
	for cmd_name, cmd in commands.items():
		out += command_descr(cmd_name, cmd)
	return out


def resolve_command(name):
	if name in commands:
		return name
	for command, macros in command_macros.items():
		if name in macros:
			return command
	raise Errors.CGenError(f"\nCant resolve command '{name}'.\n {commands_descr()}")


def parse_command(cmd_args):
	if len(cmd_args) == 0:
		return {"command": "generate", "args": dict(commands["generate"]["args"])}

	command = resolve_command(cmd_args[0])

	args = {}
	args_passed = list(cmd_args[1:])
	for arg_name, arg_val in commands[command]["args"].items():
		if args_passed:
			args[arg_name] = args_passed.pop(0)
		elif arg_val is not None:
			args[arg_name] = arg_val
		else:
			raise Errors.CGenError(f"\nToo few arguments given for the command: {command_descr(command, commands[command])}")

	if len(args_passed):
		raise Errors.CGenError(f"\nToo many arguments given:\n for command: {command_descr(command, commands[command])}")

	return {"command": command, "args": args}


def run(argv) -> int:
	try:
		command = parse_command(argv)
		commands[command["command"]]["exec"](command["args"])
	except (Errors.CGenError, Generator.GeneratorError) as error:
		Errors.err(f"Unsuccessful run : {error}")
		return 1
	return 0


def main():
	sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
	main()
