from opentracker.main import run

run()
