# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

import pytest

import jsondelta
from jsondelta.__main__ import main_dispatch
from jsondelta.jsondiffapp import main_diff
from jsondelta.jsonpatchapp import main_patch
from jsondelta import (
    jsondiffapp,
    jsonpatchapp,
)
from jsondelta.utils import EXPLICIT_MISSING_FILE


def test_jsondiff_app(filespath, capsys, reset_log):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "new.json")

    args = jsondiffapp._build_arg_parser().parse_args([afn, bfn, '--log-level=WARN'])
    assert 0 == main_diff(args)
    assert args.log_level == 'WARN'
    assert jsondelta.log.logger.level == logging.WARN

    out, err = capsys.readouterr()
    assert out.startswith("jsondiff %s %s\n" % (afn, bfn))
    assert "modified $.name:" in out
    assert "removed $.age:" in out
    assert "added $.email:" in out
    assert "type changed from string to number $.address.zip:" in out


def test_jsondiff_app_no_color(filespath, capsys):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "new.json")
    assert 0 == jsondiffapp.main([afn, bfn, '--no-color'])
    out, err = capsys.readouterr()
    assert '\x1b[' not in out
    assert "-  John" in out
    assert "+  Jane" in out


def test_jsondiff_app_identical_files(filespath, capsys):
    afn = os.path.join(filespath, "old.json")
    assert 0 == jsondiffapp.main([afn, afn])
    out, err = capsys.readouterr()
    assert out == ""


def test_jsondiff_app_null_file(filespath, capsys):
    fn = os.path.join(filespath, "old.json")

    args = jsondiffapp._build_arg_parser().parse_args([fn, EXPLICIT_MISSING_FILE])
    assert 0 == main_diff(args)

    args = jsondiffapp._build_arg_parser().parse_args([EXPLICIT_MISSING_FILE, fn])
    assert 0 == main_diff(args)
    out, err = capsys.readouterr()
    assert "removed $:" in out
    assert "added $:" in out


def test_jsondiff_app_missing_file(filespath, capsys):
    fn = os.path.join(filespath, "old.json")
    assert 1 == jsondiffapp.main([fn, os.path.join(filespath, "does-not-exist.json")])
    out, err = capsys.readouterr()
    assert "Missing file" in out


def test_jsondiff_app_invalid_json(filespath):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "broken.json")
    assert 1 == jsondiffapp.main([afn, bfn])


def test_jsondiff_app_negative_max_depth(filespath, capsys):
    fn = os.path.join(filespath, "old.json")
    with pytest.raises(SystemExit) as e:
        jsondiffapp.main([fn, fn, '--max-depth', '-1'])
    assert e.value.code == 2
    out, err = capsys.readouterr()
    assert "must be zero or more" in err


def test_jsondiff_app_negative_max_depth_from_config(filespath, tmpdir, monkeypatch):
    tmpdir.join('jsondelta_config.json').write_text(
        json.dumps({'JsonDiff': {'max_depth': -2}}), encoding='utf-8')
    monkeypatch.chdir(str(tmpdir))
    fn = os.path.join(filespath, "old.json")
    assert 1 == jsondiffapp.main([fn, fn])


def test_jsondiff_app_options(filespath, tmpdir):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "new.json")
    dfn = str(tmpdir.join("diff.json"))

    assert 0 == jsondiffapp.main([afn, bfn, '--out', dfn, '--max-depth', '1'])
    with io.open(dfn, encoding="utf8") as f:
        records = json.load(f)
    paths = [r["path"] for r in records]
    assert "$.age" in paths
    assert "$.address.city" not in paths


def test_jsondiff_app_patch_output(filespath, tmpdir, capsys):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "new.json")
    pfn = str(tmpdir.join("patch.json"))
    ofn = str(tmpdir.join("patched.json"))

    assert 0 == jsondiffapp.main([afn, bfn, '--patch'])
    out, err = capsys.readouterr()
    patch = json.loads(out)
    assert {"op": "remove", "path": "/age"} in patch

    assert 0 == jsondiffapp.main([afn, bfn, '--patch', '--out', pfn])
    assert 0 == jsonpatchapp.main([afn, pfn, '-o', ofn])
    with io.open(ofn, encoding="utf8") as f:
        patched = json.load(f)
    with io.open(bfn, encoding="utf8") as f:
        assert patched == json.load(f)


def test_jsonpatch_app(filespath, capsys):
    bfn = os.path.join(filespath, "old.json")
    pfn = os.path.join(filespath, "patch.json")
    nfn = os.path.join(filespath, "new.json")
    assert 0 == jsonpatchapp.main([bfn, pfn])
    out, err = capsys.readouterr()
    with io.open(nfn, encoding="utf8") as f:
        assert json.loads(out) == json.load(f)


def test_jsonpatch_app_indent(filespath, tmpdir):
    bfn = os.path.join(filespath, "old.json")
    pfn = os.path.join(filespath, "patch.json")
    ofn = str(tmpdir.join("out.json"))
    args = jsonpatchapp._build_arg_parser().parse_args([bfn, pfn, '-o', ofn, '--indent', '4'])
    assert 0 == main_patch(args)
    with io.open(ofn, encoding="utf8") as f:
        text = f.read()
    assert text.startswith('{\n    "name": "Jane"')


def test_jsonpatch_app_failing_patch(filespath, tmpdir, caplog):
    bfn = os.path.join(filespath, "old.json")
    pfn = os.path.join(filespath, "failing-patch.json")
    ofn = str(tmpdir.join("out.json"))
    assert 1 == jsonpatchapp.main([bfn, pfn, '-o', ofn])
    assert not os.path.exists(ofn)
    assert "PATH_NOT_FOUND" in caplog.text


def test_jsonpatch_app_missing_file(filespath, capsys):
    bfn = os.path.join(filespath, "old.json")
    assert 1 == jsonpatchapp.main([bfn, os.path.join(filespath, "nope.json")])
    out, err = capsys.readouterr()
    assert "Missing file" in out


def test_jsonpatch_app_invalid_patch(filespath):
    bfn = os.path.join(filespath, "old.json")
    pfn = os.path.join(filespath, "broken.json")
    assert 1 == jsonpatchapp.main([bfn, pfn])


def test_main_dispatch_diff(filespath):
    afn = os.path.join(filespath, "old.json")
    bfn = os.path.join(filespath, "new.json")
    assert 0 == main_dispatch(['diff', afn, bfn, '--no-color'])


def test_main_dispatch_patch(filespath, capsys):
    bfn = os.path.join(filespath, "old.json")
    pfn = os.path.join(filespath, "patch.json")
    assert 0 == main_dispatch(['patch', bfn, pfn])


def test_main_dispatch_version():
    with pytest.raises(SystemExit) as e:
        main_dispatch(['--version'])
    assert e.value.code == jsondelta.__version__


def test_main_dispatch_help():
    with pytest.raises(SystemExit) as e:
        main_dispatch(['--help'])
    assert "Usage: jsondelta" in e.value.code


def test_main_dispatch_no_args():
    with pytest.raises(SystemExit) as e:
        main_dispatch([])
    assert e.value.code.startswith("Option missing.")


def test_main_dispatch_unknown_command():
    with pytest.raises(SystemExit) as e:
        main_dispatch(['merge'])
    assert "Unrecognized command 'merge'" in e.value.code


def test_main_dispatch_config(capsys):
    with pytest.raises(SystemExit) as e:
        main_dispatch(['--config'])
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert 'JsonDiff:' in err
    assert 'JsonPatch:' in err
    assert 'ignore_order: false' in err


def test_app_config_option(capsys):
    with pytest.raises(SystemExit) as e:
        jsonpatchapp.main(['--config'])
    assert e.value.code == 1
    out, err = capsys.readouterr()
    assert 'JsonPatch:' in err
    assert 'indent: 2' in err


def test_version_info():
    assert ".".join(str(p) for p in jsondelta.version_info) == jsondelta.__version__
