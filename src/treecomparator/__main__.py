from treecomparator.main import run

run()
