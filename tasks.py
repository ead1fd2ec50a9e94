import invoke


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=optionals --cov-report=xml:coverage.xml")
