from awkit.find_bucket import find_bucket
from awkit.models import Bucket


def _bucket(bucket_id):
    return Bucket(id=bucket_id, type="type", hostname="testhost", client="testclient")


def test_find_bucket():
    expected = "aw-datastore-test_test-host"
    b1 = _bucket("no match")
    b2 = _bucket(expected)
    b3 = _bucket("no match")
    buckets = [b1, b2, b3]

    assert find_bucket("aw-datastore-test", "testhost", buckets) == expected
    assert find_bucket("aw-datastore-test", "unavailablehost", buckets) is None
    assert find_bucket("aw-datastore-test", None, [b1, b3]) is None


def test_find_bucket_any_hostname():
    buckets = [_bucket("no match"), _bucket("aw-datastore-test_test-host")]
    assert find_bucket("aw-datastore-test", None, buckets) == "aw-datastore-test_test-host"