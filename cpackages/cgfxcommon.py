import Denv
from cpackages import cbase, cunittest

PACKAGE_PATH = "github.com\\jurgen-kluft\\cgfxcommon"


def get_package(unittest_builder=cunittest.get_package, base_builder=cbase.get_package) -> Denv.Package:
	# Dependencies
	unittestpkg = unittest_builder()
	basepkg = base_builder()

	mainpkg = Denv.Package("cgfxcommon")
	mainpkg.add_package(unittestpkg)
	mainpkg.add_package(basepkg)

	mainlib = Denv.setup_default_cpp_lib_project("cgfxcommon", PACKAGE_PATH)
	mainlib.dependencies.append(basepkg.get_main_lib())

	maintest = Denv.setup_default_cpp_test_project("cgfxcommon" + "_test", PACKAGE_PATH)
	maintest.dependencies.append(unittestpkg.get_main_lib())
	maintest.dependencies.append(mainlib)

	mainpkg.add_main_lib(mainlib)
	mainpkg.add_unittest(maintest)
	return mainpkg
