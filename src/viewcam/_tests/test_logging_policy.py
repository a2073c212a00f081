from viewcam.logging_policy import load_logging_policy


def test_logging_policy_defaults():
    policy = load_logging_policy({})
    assert policy.log_camera_info is False
    assert policy.debug_orbit is False
    assert policy.debug_pan is False
    assert policy.debug_dolly is False
    assert policy.debug_anim is False


def test_logging_policy_env_overrides():
    env = {
        "VIEWCAM_LOG_CAMERA_INFO": "1",
        "VIEWCAM_DEBUG_ORBIT": "true",
        "VIEWCAM_DEBUG_PAN": "yes",
        "VIEWCAM_DEBUG_DOLLY": "off",
        "VIEWCAM_DEBUG_ANIM": "on",
    }
    policy = load_logging_policy(env)
    assert policy.log_camera_info is True
    assert policy.debug_orbit is True
    assert policy.debug_pan is True
    assert policy.debug_dolly is False
    assert policy.debug_anim is True


def test_logging_policy_reads_process_env(monkeypatch):
    monkeypatch.setenv("VIEWCAM_DEBUG_PAN", "1")
    assert load_logging_policy().debug_pan is True
