import nox


@nox.session
def tests(session):
    session.install("pytest")
    session.run("pip", "install", ".[dev]")
    session.run("python", "examples/dipole_field.py")
    session.run("pytest")
