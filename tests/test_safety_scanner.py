"""Tests for the safety pass."""

import pytest

from failsafe.validators import Category, FindingCode, ValidatorConfig
from failsafe.validators.safety_scanner import SafetyScanner
from tests.conftest import codes

scanner = SafetyScanner()


class TestDestructiveCommands:
    @pytest.mark.parametrize("command", [
        "rm -rf /",
        "RM -RF /tmp/build",
        "rm -fr build",
        "rm -Rf ~",
        "rm -r -f build",
        "sh -c 'rm -rf node_modules'",
        'exec("rm" "-rf" dir)',
        "rm --recursive --force /",
        "rm --force --recursive /tmp",
        "rm -r --force build",
        'rm "-r" "-f" /',
    ])
    def test_recursive_force_delete(self, config, command):
        findings = scanner.scan(command, config)

        assert FindingCode.SAFETY_DESTRUCTIVE_COMMAND in codes(findings)
        assert all(f.category == Category.SAFETY for f in findings)

    @pytest.mark.parametrize("command", ["rm file.txt", "rm -r dir", "git rm --cached a.txt", "farm -rf"])
    def test_non_destructive_rm(self, config, command):
        assert FindingCode.SAFETY_DESTRUCTIVE_COMMAND not in codes(scanner.scan(command, config))

    @pytest.mark.parametrize("command", ["format c:", "FORMAT D:", "mkfs.ext4 /dev/sda1", "dd if=/dev/zero of=/dev/sda bs=1M"])
    def test_disk_format(self, config, command):
        assert codes(scanner.scan(command, config)) == [FindingCode.SAFETY_DISK_FORMAT]


class TestHardcodedSecrets:
    @pytest.mark.parametrize("code, name", [
        ('const password = "1234";', "password"),
        ("api_key = 'abcd'", "api_key"),
        ('apiKey: "sk-live-123"', "apiKey"),
        ('const secret = "hardcoded";', "secret"),
        ('this.accessToken = `abc`;', "this.accessToken"),
        ('{"db_password": "hunter2"}', "db_password"),
        ('token := "xyz"', "token"),
        ('const token: string = "abc123";', "token"),
    ])
    def test_literal_assignment(self, config, code, name):
        findings = scanner.scan(code, config)

        assert codes(findings) == [FindingCode.SAFETY_HARDCODED_SECRET]
        assert findings[0].evidence == name

    def test_secret_value_is_not_echoed(self, config):
        findings = scanner.scan('PASSWORD = "correct-horse"', config)

        assert "correct-horse" not in findings[0].message

    @pytest.mark.parametrize("code", [
        "const password = process.env.PASSWORD;",
        "token: string",
        'password = ""',
        'if (password === "x") {}',
        "api_key = os.environ['API_KEY']",
    ])
    def test_non_literal_values_are_ignored(self, config, code):
        assert FindingCode.SAFETY_HARDCODED_SECRET not in codes(scanner.scan(code, config))


class TestDynamicExecution:
    def test_eval(self, config):
        findings = scanner.scan('eval("2+2")', config)

        assert codes(findings) == [FindingCode.SAFETY_DYNAMIC_EXECUTION]
        assert findings[0].evidence == "eval"

    def test_function_constructor(self, config):
        findings = scanner.scan('const f = new Function("return 1");', config)

        assert findings[0].evidence == "new Function"

    @pytest.mark.parametrize("code, call", [
        ('window.eval("2+2")', "window.eval"),
        ("globalThis.eval(src)", "globalThis.eval"),
    ])
    def test_global_object_eval(self, config, code, call):
        findings = scanner.scan(code, config)

        assert codes(findings) == [FindingCode.SAFETY_DYNAMIC_EXECUTION]
        assert findings[0].evidence == call

    @pytest.mark.parametrize("code", ["const m = /x/.exec(s);", "evaluate(expr)", "executor(job)"])
    def test_lookalikes_are_ignored(self, config, code):
        assert scanner.scan(code, config) == []


class TestPrivilegedModules:
    def test_requires_are_coalesced(self, config):
        findings = scanner.scan('require("child_process"); require("fs"); require("os");', config)

        assert codes(findings) == [FindingCode.SAFETY_PRIVILEGED_MODULE]
        assert findings[0].count == 3
        assert findings[0].evidence == "child_process, fs, os"

    def test_es_import_with_node_prefix(self, config):
        findings = scanner.scan('import { readFileSync } from "node:fs";', config)

        assert findings[0].evidence == "fs"

    def test_python_imports(self, config):
        findings = scanner.scan("import subprocess\nfrom shutil import rmtree\n", config)

        assert findings[0].evidence == "subprocess, shutil"

    @pytest.mark.parametrize("code, evidence", [
        ("import sys, subprocess", "subprocess"),
        ("import os as o, json, shutil as sh", "os, shutil"),
    ])
    def test_every_name_of_an_import_list_is_checked(self, config, code, evidence):
        findings = scanner.scan(code, config)

        assert codes(findings) == [FindingCode.SAFETY_PRIVILEGED_MODULE]
        assert findings[0].evidence == evidence
        assert findings[0].location.line == 1

    def test_allow_list_applies_per_imported_name(self):
        config = ValidatorConfig(allowed_modules=frozenset({"subprocess"}))

        assert scanner.scan("import subprocess, shutil", config)[0].evidence == "shutil"

    def test_ordinary_modules_are_ignored(self, config):
        code = 'import React from "react";\nconst _ = require("lodash");\nimport json\n'
        assert scanner.scan(code, config) == []

    def test_allow_list(self):
        config = ValidatorConfig(allowed_modules=frozenset({"fs", "os"}))
        findings = scanner.scan('require("fs"); require("child_process");\nimport os.path\n', config)

        assert len(findings) == 1
        assert findings[0].evidence == "child_process"
        assert findings[0].count == 1


def test_findings_follow_match_order(config):
    code = 'require("fs");\nconst secret = "abc";\nrm -rf /'
    assert codes(scanner.scan(code, config)) == [
        FindingCode.SAFETY_PRIVILEGED_MODULE,
        FindingCode.SAFETY_HARDCODED_SECRET,
        FindingCode.SAFETY_DESTRUCTIVE_COMMAND,
    ]
