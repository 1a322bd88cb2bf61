"""AWS stub tests for identity engine STS caller identity behavior."""

import boto3
import pytest
from botocore.stub import Stubber

from core.engine import identity_engine
from core.models import AwsIdentityError


def _patch_session(monkeypatch, sts):
    class _FakeSession:
        def __init__(self, profile_name=None, region_name=None):
            self.profile_name = profile_name
            self.region_name = region_name

        def client(self, name):
            assert name == "sts"
            return sts

    monkeypatch.setattr(identity_engine.boto3.session, "Session", _FakeSession)


def test_get_current_aws_identity_uses_sts(monkeypatch):
    sts = boto3.session.Session(region_name="us-east-1").client("sts")
    stubber = Stubber(sts)
    stubber.add_response(
        "get_caller_identity",
        {"Account": "123", "Arn": "arn:aws-cn:sts::123:assumed-role/x/y", "UserId": "U"},
        expected_params={},
    )
    _patch_session(monkeypatch, sts)

    with stubber:
        ident = identity_engine.get_current_aws_identity(profile="p", region="us-east-1")

    assert ident.account == "123"
    assert ident.profile == "p"
    assert ident.region == "us-east-1"
    assert ident.partition == "aws-cn"


def test_get_current_aws_identity_wraps_client_errors(monkeypatch):
    sts = boto3.session.Session(region_name="us-east-1").client("sts")
    stubber = Stubber(sts)
    stubber.add_client_error("get_caller_identity", service_error_code="ExpiredToken")
    _patch_session(monkeypatch, sts)

    with stubber, pytest.raises(AwsIdentityError):
        identity_engine.get_current_aws_identity()


def test_requires_aws_identity_blocks_on_failure(monkeypatch):
    def _boom(profile=None, region=None):
        raise AwsIdentityError("no creds")

    monkeypatch.setattr(identity_engine, "get_current_aws_identity", _boom)
    called = []

    @identity_engine.requires_aws_identity
    def command(profile=None, region=None):
        called.append(True)

    with pytest.raises(AwsIdentityError):
        command(profile="p", region="r")
    assert called == []
