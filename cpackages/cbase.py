import Denv
from cpackages import cunittest


def get_package() -> Denv.Package:
	unittestpkg = cunittest.get_package()

	mainpkg = Denv.Package("cbase")
	mainpkg.add_package(unittestpkg)

	mainlib = Denv.setup_default_cpp_lib_project("cbase", "github.com\\jurgen-kluft\\cbase")

	maintest = Denv.setup_default_cpp_test_project("cbase_test", "github.com\\jurgen-kluft\\cbase")
	maintest.dependencies.append(unittestpkg.get_main_lib())
	maintest.dependencies.append(mainlib)

	mainpkg.add_main_lib(mainlib)
	mainpkg.add_unittest(maintest)
	return mainpkg
