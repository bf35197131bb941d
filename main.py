from core.logger import logger
from domain.entities import Department, Employee


def build_company() -> Department:
    """Собирает демонстрационную структуру: сначала сотрудники, затем подразделения."""
    ana = Employee('Ana', 'Analista de Sistemas', 1500, '01/01/2010')
    bruno = Employee('Bruno', 'Desenvolvedor', 3500, '01/01/2015')
    carlos = Employee('Carlos', 'Designer', 2000, '01/01/2012')

    dept_ti = Department('Tecnologia Da Informação', 'TI', 'Departamento de TI')
    dept_ti.add_child(ana)
    dept_ti.add_child(bruno)

    dept_design = Department('Comunicação Visual', 'CV', 'Departamento de Design')
    dept_design.add_child(carlos)

    # Корневое подразделение группирует дочерние
    company = Department('Empresa Falsa', 'EF', 'Empresa não existente')
    company.add_child(dept_ti)
    company.add_child(dept_design)

    return company


def main() -> None:
    logger.info('[STARTUP] Сборка структуры компании...')
    try:
        company = build_company()
    except Exception as e:
        logger.error(f'[STARTUP] Ошибка при сборке структуры: {e}')
        raise

    logger.info('[RENDER] Вывод структуры компании...')
    try:
        company.render_detail()
    except Exception as e:
        logger.error(f'[RENDER] Ошибка при выводе структуры: {e}')
        raise

    logger.info('[SHUTDOWN] Структура компании выведена')


if __name__ == '__main__':
    main()
