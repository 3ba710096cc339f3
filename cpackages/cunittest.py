import Denv


def get_package() -> Denv.Package:
	mainpkg = Denv.Package("cunittest")

	mainlib = Denv.setup_default_cpp_lib_project("cunittest", "github.com\\jurgen-kluft\\cunittest")

	mainpkg.add_main_lib(mainlib)
	return mainpkg
