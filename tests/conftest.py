"""
Pytest fixtures
"""
import pytest

from domain.entities import Department, Employee


@pytest.fixture
def ana() -> Employee:
    return Employee('Ana', 'Analista de Sistemas', 1500, '01/01/2010')


@pytest.fixture
def bruno() -> Employee:
    return Employee('Bruno', 'Desenvolvedor', 3500, '01/01/2015')


@pytest.fixture
def dept_ti(ana, bruno) -> Department:
    dept = Department('Tecnologia Da Informação', 'TI', 'Departamento de TI')
    dept.add_child(ana)
    dept.add_child(bruno)
    return dept


@pytest.fixture
def read_lines(capsys):
    """Возвращает строки, выведенные в stdout с момента прошлого вызова."""

    def _read() -> list[str]:
        return capsys.readouterr().out.splitlines()

    return _read
