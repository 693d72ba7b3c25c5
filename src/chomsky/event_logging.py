"""Structured events emitted while a grammar is normalized.

A run logs one ``start`` event for the input grammar and one ``stage`` event
after each stage. Every event carries the size of the grammar at that point
plus whatever the stage reports about its work. In a file, each event is one
line of the form ``<type> <timestamp> <json>``.
"""

import datetime
import json

import attr

class Logger:

    def log(self, event_type, data=None):
        raise NotImplementedError

    def log_grammar(self, event_type, grammar, **details):
        data = grammar_summary(grammar)
        data.update(details)
        self.log(event_type, data)

class NullLogger(Logger):

    def log(self, event_type, data=None):
        pass

class MemoryLogger(Logger):
    """Keeps every event in a list."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event_type, data=None):
        self.events.append(LogEvent(event_type, get_current_time(), data))

    def of_type(self, event_type):
        return [e for e in self.events if e.type == event_type]

class FileLogger(Logger):

    def __init__(self, file, flush=False):
        super().__init__()
        self.file = file
        self.flush = flush

    def log(self, event_type, data=None):
        self.file.write(LogEvent(event_type, get_current_time(), data).to_line())
        self.file.write('\n')
        if self.flush:
            self.file.flush()

@attr.s(frozen=True)
class LogEvent:
    type = attr.ib()
    timestamp = attr.ib()
    data = attr.ib(default=None)

    def to_line(self):
        parts = [self.type, str(self.timestamp.timestamp())]
        if self.data is not None:
            parts.append(json.dumps(self.data, separators=(',', ':'),
                sort_keys=True, ensure_ascii=False))
        return ' '.join(parts)

def grammar_summary(grammar):
    return {
        'nonterminals' : len(grammar.nonterminals),
        'terminals' : len(grammar.terminals),
        'rules' : grammar.size
    }

def get_current_time():
    return datetime.datetime.now(datetime.timezone.utc)
