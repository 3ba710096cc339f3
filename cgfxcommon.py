import Generator
from cpackages import cgfxcommon


def main():
	context = Generator.init()
	Generator.generate_files(context)
	Generator.generate(context, cgfxcommon.get_package())


if __name__ == "__main__":
	main()
