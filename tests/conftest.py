import pytest
import Denv
import Errors


def stub_package(name):
	package = Denv.Package(name)
	package.add_main_lib(Denv.setup_default_cpp_lib_project(name, f"github.com\\stub\\{name}"))
	return package


@pytest.fixture
def stub_builders():
	return lambda: stub_package("cunittest"), lambda: stub_package("cbase")


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
	monkeypatch.setattr(Errors, "global_verbose_level", 0)


def make_workspace(root):
	for repo in ["cgfxcommon", "cbase", "cunittest"]:
		repo_dir = root / "github.com" / "jurgen-kluft" / repo
		(repo_dir / "source" / "main" / "cpp").mkdir(parents=True)
		(repo_dir / "source" / "main" / "include" / repo).mkdir(parents=True)
		(repo_dir / "source" / "test" / "cpp").mkdir(parents=True)
		(repo_dir / "source" / "main" / "cpp" / f"c_{repo}.cpp").write_text("")
		(repo_dir / "source" / "main" / "include" / repo / f"c_{repo}.h").write_text("")
		(repo_dir / "source" / "test" / "cpp" / f"test_{repo}.cpp").write_text("")
	return root


@pytest.fixture
def workspace(tmp_path):
	return make_workspace(tmp_path)


@pytest.fixture
def package_dir(workspace):
	return str(workspace / "github.com" / "jurgen-kluft" / "cgfxcommon")


@pytest.fixture
def spaced_package_dir(tmp_path):
	workspace = make_workspace(tmp_path / "my work")
	return str(workspace / "github.com" / "jurgen-kluft" / "cgfxcommon")
