"""Fixed display texts. The workbooks are Russian, so are the labels."""

TASK_TITLE = "Задание {id}"
SINGLE_CHOICE_INSTRUCTIONS = "Выберите один правильный вариант."
EMPTY_ANSWER_TEXT = "—"
NO_ANSWER_PLACEHOLDER = "—"

LOAD_ERROR_MESSAGE = "Не удалось загрузить Question.xlsx. Проверьте источник заданий."

RESULTS_SHEET_TITLE = "Результаты"
RESPONDENT_FIELDS = ("ФИО", "Группа", "Роль", "Возраст", "Пол", "Сложность")
TOTAL_TIME_LABEL = "Общее время"
RESULTS_HEADER = ("Задание", "Ответ", "Время прохождения", "Баллы")


def task_title(task_id: int) -> str:
    return TASK_TITLE.format(id=task_id)
