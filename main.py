from rich.pretty import pprint

from synopsis import *

usage = Usage("app")
usage.add_option(Option("-q", "--quiet", description="Print less."))

run = Entry("run", "Runs the thing.\n\nThe file is read once and never modified.")
run.add_arg("file")
level = Option("-l", "--level", description="How much detail to print while running.")
level.add_arg("n")
run.add_option(level)
usage.add_entry(run)


if __name__ == '__main__':
    pprint(usage)
    usage.show()
    usage.show("run")
