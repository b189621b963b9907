"""Built-in fixture table: the badssl.com suite plus a few well-known hosts.

See https://github.com/FedericoCeratto/ssl-comparison/blob/master/README.md
for how other clients classify the same endpoints.
"""

from cert_check.models.fixture import CertTest, FixtureTable

HTTP_CERT_TESTS: tuple[CertTest, ...] = (
    CertTest(target="https://wrong.host.badssl.com/", category="bad", desc="wrong.host"),
    CertTest(
        target="https://captive-portal.badssl.com/",
        category="bad",
        desc="captive-portal",
    ),
    CertTest(target="https://expired.badssl.com/", category="bad", desc="expired"),
    CertTest(target="https://google.com/", category="good", desc="good"),
    CertTest(
        target="https://self-signed.badssl.com/", category="bad", desc="self-signed"
    ),
    CertTest(
        target="https://untrusted-root.badssl.com/",
        category="bad",
        desc="untrusted-root",
    ),
    CertTest(
        target="https://revoked.badssl.com/", category="bad_broken", desc="revoked"
    ),
    CertTest(
        target="https://pinning-test.badssl.com/",
        category="bad_broken",
        desc="pinning-test",
    ),
    CertTest(
        target="https://no-common-name.badssl.com/",
        category="dubious_broken",
        desc="no-common-name",
    ),
    CertTest(
        target="https://no-subject.badssl.com/",
        category="dubious_broken",
        desc="no-subject",
    ),
    CertTest(
        target="https://incomplete-chain.badssl.com/",
        category="dubious",
        desc="incomplete-chain",
    ),
    CertTest(
        target="https://sha1-intermediate.badssl.com/",
        category="bad_broken",
        desc="sha1-intermediate",
    ),
    CertTest(target="https://sha256.badssl.com/", category="good", desc="sha256"),
    CertTest(target="https://sha384.badssl.com/", category="good", desc="sha384"),
    CertTest(target="https://sha512.badssl.com/", category="good", desc="sha512"),
    CertTest(target="https://1000-sans.badssl.com/", category="good", desc="1000-sans"),
    CertTest(
        target="https://10000-sans.badssl.com/",
        category="good_broken",
        desc="10000-sans",
    ),
    CertTest(target="https://ecc256.badssl.com/", category="good", desc="ecc256"),
    CertTest(target="https://ecc384.badssl.com/", category="good", desc="ecc384"),
    CertTest(target="https://rsa2048.badssl.com/", category="good", desc="rsa2048"),
    CertTest(
        target="https://rsa8192.badssl.com/", category="dubious_broken", desc="rsa8192"
    ),
    CertTest(target="http://http.badssl.com/", category="good", desc="regular http"),
    # Plain HTTP server behind an https:// URL is currently accepted
    CertTest(
        target="https://http.badssl.com/",
        category="bad_broken",
        desc="http on https URL",
    ),
    CertTest(target="https://cbc.badssl.com/", category="dubious_broken", desc="cbc"),
    CertTest(target="https://rc4-md5.badssl.com/", category="bad", desc="rc4-md5"),
    CertTest(target="https://rc4.badssl.com/", category="bad", desc="rc4"),
    CertTest(target="https://3des.badssl.com/", category="bad", desc="3des"),
    CertTest(target="https://null.badssl.com/", category="bad", desc="null"),
    CertTest(
        target="https://mozilla-old.badssl.com/",
        category="bad_broken",
        desc="mozilla-old",
    ),
    CertTest(
        target="https://mozilla-intermediate.badssl.com/",
        category="dubious_broken",
        desc="mozilla-intermediate",
    ),
    CertTest(
        target="https://mozilla-modern.badssl.com/",
        category="good",
        desc="mozilla-modern",
    ),
    CertTest(target="https://dh480.badssl.com/", category="bad", desc="dh480"),
    CertTest(target="https://dh512.badssl.com/", category="bad", desc="dh512"),
    CertTest(
        target="https://dh1024.badssl.com/", category="dubious_broken", desc="dh1024"
    ),
    CertTest(target="https://dh2048.badssl.com/", category="good", desc="dh2048"),
    CertTest(
        target="https://dh-small-subgroup.badssl.com/",
        category="bad_broken",
        desc="dh-small-subgroup",
    ),
    CertTest(
        target="https://dh-composite.badssl.com/",
        category="bad_broken",
        desc="dh-composite",
    ),
    CertTest(
        target="https://static-rsa.badssl.com/",
        category="dubious_broken",
        desc="static-rsa",
    ),
    CertTest(
        target="https://tls-v1-0.badssl.com:1010/",
        category="dubious_broken",
        desc="tls-v1-0",
    ),
    CertTest(
        target="https://tls-v1-1.badssl.com:1011/",
        category="dubious_broken",
        desc="tls-v1-1",
    ),
    CertTest(
        target="https://invalid-expected-sct.badssl.com/",
        category="bad_broken",
        desc="invalid-expected-sct",
    ),
    CertTest(target="https://hsts.badssl.com/", category="good", desc="hsts"),
    CertTest(target="https://upgrade.badssl.com/", category="good", desc="upgrade"),
    CertTest(
        target="https://preloaded-hsts.badssl.com/",
        category="good",
        desc="preloaded-hsts",
    ),
    CertTest(
        target="https://subdomain.preloaded-hsts.badssl.com/",
        category="bad",
        desc="subdomain.preloaded-hsts",
    ),
    CertTest(
        target="https://https-everywhere.badssl.com/",
        category="good",
        desc="https-everywhere",
    ),
    CertTest(
        target=(
            "https://long-extended-subdomain-name-containing-many-letters-and-dashes"
            ".badssl.com/"
        ),
        category="good",
        desc="long-extended-subdomain-name-containing-many-letters-and-dashes",
    ),
    CertTest(
        target=(
            "https://longextendedsubdomainnamewithoutdashesinordertotestwordwrapping"
            ".badssl.com/"
        ),
        category="good",
        desc="longextendedsubdomainnamewithoutdashesinordertotestwordwrapping",
    ),
    CertTest(
        target="https://superfish.badssl.com/",
        category="bad",
        desc="(Lenovo) Superfish",
    ),
    CertTest(
        target="https://edellroot.badssl.com/", category="bad", desc="(Dell) eDellRoot"
    ),
    CertTest(
        target="https://dsdtestprovider.badssl.com/",
        category="bad",
        desc="(Dell) DSD Test Provider",
    ),
    CertTest(
        target="https://preact-cli.badssl.com/", category="bad", desc="preact-cli"
    ),
    CertTest(
        target="https://webpack-dev-server.badssl.com/",
        category="bad",
        desc="webpack-dev-server",
    ),
    CertTest(
        target="https://mitm-software.badssl.com/",
        category="bad",
        desc="mitm-software",
    ),
    CertTest(
        target="https://sha1-2016.badssl.com/", category="dubious", desc="sha1-2016"
    ),
    CertTest(target="https://sha1-2017.badssl.com/", category="bad", desc="sha1-2017"),
)

SOCKET_CERT_TESTS: tuple[CertTest, ...] = (
    CertTest(target="imap.gmail.com", port=993, category="good", desc="IMAP"),
    CertTest(
        target="wrong.host.badssl.com", port=443, category="bad", desc="wrong.host"
    ),
    CertTest(
        target="captive-portal.badssl.com",
        port=443,
        category="bad",
        desc="captive-portal",
    ),
    CertTest(target="expired.badssl.com", port=443, category="bad", desc="expired"),
    CertTest(target="null.badssl.com", port=443, category="bad", desc="null"),
)

BUILTIN_FIXTURES = FixtureTable(
    version="1.0",
    http=HTTP_CERT_TESTS,
    sockets=SOCKET_CERT_TESTS,
)
