"""
Evaluation of parser output against a gold standard by means of the
official evaluation scripts of the shared tasks, run as external
processes. No scores are computed here.
"""

import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod

log = logging.getLogger(__name__)


EVALUATION_TIMEOUT = 60 * 60
"""Seconds an evaluation script may run."""


class CorpusEvaluator(ABC):
    @abstractmethod
    def evaluate(self, system_path, gold_path):
        """
        Evaluates the system output against a gold standard.

        Args:
            system_path (str): the file path of the system output
            gold_path (str): the file path of the gold standard

        Returns:
            the output of the evaluation (can be None)
        """
        raise NotImplementedError


class ScriptEvaluator(CorpusEvaluator):
    def __init__(self, interpreter, script_path, arguments, timeout=EVALUATION_TIMEOUT):
        """
        Runs an evaluation script and returns its standard output.

        Args:
            interpreter (str): the program running the script
            script_path (str): the path of the script
            arguments (list): the arguments of the script, where the
                placeholders "{gold}" and "{system}" are replaced by the
                paths of the files to compare
            timeout (int): seconds after which the script is killed
        """
        self.interpreter = interpreter
        self.script_path = script_path
        self.arguments = arguments
        self.timeout = timeout

    def command(self, system_path, gold_path):
        return [self.interpreter, self.script_path] + [
            a.format(gold=gold_path, system=system_path) for a in self.arguments
        ]

    def evaluate(self, system_path, gold_path):
        for path in (system_path, gold_path, self.script_path):
            if not os.path.isfile(path):
                raise FileNotFoundError("File {} not found.".format(path))
        command = self.command(system_path, gold_path)
        log.debug("running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                universal_newlines=True,
            )
        except OSError as e:
            log.error("Could not run %s: %s", command[0], e)
            return None
        if completed.returncode != 0:
            log.warning(
                "%s exited with %d: %s",
                self.script_path,
                completed.returncode,
                completed.stderr.strip(),
            )
        return completed.stdout


class CoNLLUEvaluator(ScriptEvaluator):
    """The evaluation script of the CoNLL 2017 shared task (python)."""

    def __init__(self, script_path, timeout=EVALUATION_TIMEOUT):
        super(CoNLLUEvaluator, self).__init__(
            sys.executable, script_path, ["-v", "{gold}", "{system}"], timeout
        )


class CoNLLXEvaluator(ScriptEvaluator):
    """The evaluation script of the CoNLL-X shared task (perl)."""

    def __init__(self, script_path, timeout=EVALUATION_TIMEOUT):
        super(CoNLLXEvaluator, self).__init__(
            "perl", script_path, ["-q", "-g", "{gold}", "-s", "{system}"], timeout
        )
