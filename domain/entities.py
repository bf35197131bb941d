from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from core.logger import logger


class Component(ABC):
    """Узел оргструктуры: сотрудник или подразделение"""

    @abstractmethod
    def render_detail(self) -> None:
        """Вывести детали узла в stdout."""


@dataclass(frozen=True)
class Employee(Component):
    """Сотрудник"""

    name: str
    role: str
    salary: float
    admission_date: str

    def render_detail(self) -> None:
        print(
            f'Nome: {self.name}, Cargo: {self.role}, '
            f'Salário: {self.salary:.2f}, Data de Admissão: {self.admission_date}'
        )


@dataclass(eq=False)
class Department(Component):
    """Подразделение с упорядоченным списком дочерних узлов"""

    name: str
    code: str
    description: str
    _children: list[Component] = field(default_factory=list, init=False, repr=False)

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(self._children)

    def add_child(self, component: Component) -> None:
        """
        Добавляет узел в конец списка.

        Дубликаты и циклы не проверяются: подразделение, добавленное
        в собственное поддерево, уводит render_detail в бесконечную рекурсию.
        """
        self._children.append(component)
        logger.debug(f'В подразделение {self.code} добавлен узел #{len(self._children)}')

    def render_detail(self) -> None:
        print(f'Departamento: {self.name}')
        print(f'Sigla: {self.code}')
        print(f'Descrição: {self.description}')

        # Pre-order: заголовок, затем поддеревья в порядке добавления
        for component in self._children:
            component.render_detail()
