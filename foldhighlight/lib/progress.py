'''
Logging infrastructure. Messages go to the console, coloured by kind, with optional boxed
panels for supplementary details (e.g., the offending code).
'''

from dataclasses import dataclass, field
import shutil
from typing import List, Optional, Set


RESET = '\033[0m'

LINE_NUMBER_COLOUR = '\033[30;1m'
LINE_NUMBER_WIDTH = 4

HIGHLIGHT_COLOUR = '\033[43;30m'


def wrap(text, width):
    line_number = 1
    start_of_line = True

    if text == '':
        yield (1, True, '')
    while text:
        newline_index = text.find('\n')
        if newline_index != -1 and newline_index <= width:
            yield (line_number, start_of_line, text[:newline_index])
            text = text[newline_index + 1:]
            start_of_line = True
            line_number += 1
        else:
            yield (line_number, start_of_line, text[:width])
            text = text[width:]
            start_of_line = False


@dataclass
class Details:
    title: str
    content: str
    show_line_numbers: bool = False
    highlight_lines: Set[int] = field(default_factory = set)


class Message:
    LOCATION_COLOUR = ''
    MSG_COLOUR = ''
    TAG = ''

    def __init__(self, location: str, msg: str, details_list: Optional[List[Details]] = None):
        self._location = location
        self._msg = msg
        self._details_list = details_list or []

    @property
    def location(self):
        return self._location

    @property
    def msg(self):
        return self._msg

    @property
    def details_list(self):
        return list(self._details_list)

    def print(self):
        print(f'{self.LOCATION_COLOUR}{self.TAG}{self._location}:{RESET} {self.MSG_COLOUR}{self._msg}{RESET}')

        terminal_width = shutil.get_terminal_size(fallback = (80, 40)).columns
        inner_width = max(20, terminal_width - 6)

        first = True
        for details in self._details_list:
            if first:
                print(f'  ┌─{"─" * inner_width}─┐')
                first = False
            else:
                print(f'  ├─{"─" * inner_width}─┤')

            if details.show_line_numbers:
                text_width = inner_width - LINE_NUMBER_WIDTH - 1

                for line_number, start_of_line, line in wrap(details.content.rstrip(), text_width):
                    n_str = str(line_number).rjust(LINE_NUMBER_WIDTH) if start_of_line else (' ' * LINE_NUMBER_WIDTH)
                    hl_str = HIGHLIGHT_COLOUR if line_number in details.highlight_lines else ''
                    print(f'  │{LINE_NUMBER_COLOUR}{n_str}{RESET}  {hl_str}{line}{" " * (text_width - len(line))}{RESET} │')

            else:
                for _, _, line in wrap(details.content.rstrip(), inner_width):
                    print(f'  │ {line}{" " * (inner_width - len(line))} │')

        if not first:
            print(f'  └─{"─" * inner_width}─┘')


class WarningMsg(Message):
    LOCATION_COLOUR = '\033[33;1m'
    MSG_COLOUR = '\033[37;1m'
    TAG = '[!] '


class Progress:
    def __init__(self, quiet = False):
        self._quiet = quiet
        self._warnings = []


    def show(self, msg: Message):
        if not self._quiet:
            msg.print()
        if isinstance(msg, WarningMsg):
            self._warnings.append(msg)
        return msg


    def warning(self, location, *, msg, code = None, highlight_lines = None):
        details_list = []
        if code:
            details_list.append(Details('Code',
                                        code,
                                        show_line_numbers = True,
                                        highlight_lines = highlight_lines or set()))
        return self.show(WarningMsg(location, msg, details_list))


    def get_warnings(self):
        return list(self._warnings)


    def clear_warnings(self):
        self._warnings.clear()
