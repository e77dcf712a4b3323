"""Presentation text. Pure formatting; never touches task state."""


class Ui:
    def __init__(self, name: str = 'Tasktrack'):
        self.name = name

    def greeting(self) -> str:
        return f"Hello! I'm {self.name}.\nWhat can I do for you?"

    def farewell(self) -> str:
        return 'Bye. Hope to see you again soon!'

    def invalid_date_format_message(self) -> str:
        return 'Invalid date format! Please use YYYY-MM-DD HH:mm (e.g. 2024-03-01 23:59).'

    def render_matches(self, listing: str) -> str:
        if not listing:
            return 'There are no matching tasks in your list.'
        return 'Here are the matching tasks in your list:\n' + listing

    def save_failed_warning(self) -> str:
        return 'Warning: your tasks could not be saved; this change only lasts until you exit.'
