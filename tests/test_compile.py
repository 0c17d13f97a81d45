

def test_compile():
    import geodist
    import geodist.calc
    import geodist.cli
    import geodist.coordinates
    import geodist.ellipsoids
    import geodist.errors
    import geodist.report
    import geodist.validation

    assert geodist.__version__ == 'v1.0.0'
    assert geodist.compute is geodist.calc.compute
