from housing_regression.main import cli

cli(prog_name="housing-regression")
