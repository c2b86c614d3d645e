import io
from urllib.parse import urlencode

from contact_app.cgi_main import CGIStreamSink, build_request, main


def run_cgi(environ, body=b""):
    stdout = io.StringIO()
    assert main(environ=environ, stdin=io.BytesIO(body), stdout=stdout) == 0
    head, _, content = stdout.getvalue().partition("\r\n\r\n")
    return head.split("\r\n"), content


def post_environ(body, uri="/submit"):
    return {
        "REQUEST_METHOD": "POST",
        "REQUEST_URI": uri,
        "CONTENT_TYPE": "application/x-www-form-urlencoded",
        "CONTENT_LENGTH": str(len(body)),
    }


def test_get_root():
    head, content = run_cgi({"REQUEST_METHOD": "GET", "REQUEST_URI": "/"})

    assert head == ["Status: 200 OK", "Content-Type: text/html; charset=UTF-8"]
    assert "<form" in content


def test_post_valid_submission():
    body = urlencode({"name": "Mario Rossi", "email": "mario@example.com", "message": "Questo è un messaggio"}).encode("utf-8")
    head, content = run_cgi(post_environ(body), body)

    assert head[0] == "Status: 200 OK"
    assert "Grazie" in content


def test_post_invalid_submission():
    body = b"name=A&email=invalid&message=Ciao"
    head, content = run_cgi(post_environ(body), body)

    assert head[0].startswith("Status: 422")
    assert "Correggi gli errori" in content


def test_unknown_route():
    head, content = run_cgi({"REQUEST_METHOD": "GET", "REQUEST_URI": "/nope?x=1"})

    assert head[0] == "Status: 404 Not Found"
    assert "404 Not Found" in content


def test_empty_environment_defaults_to_form():
    head, content = run_cgi({})

    assert head[0] == "Status: 200 OK"
    assert "<form" in content


def test_build_request_from_environ():
    body = b"name=Mario&name=Luigi&email="
    request = build_request({
        "REQUEST_METHOD": "post",
        "PATH_INFO": "/submit",
        "QUERY_STRING": "x=1",
        "CONTENT_LENGTH": str(len(body)),
    }, io.BytesIO(body))

    assert request.method == "POST"
    assert request.path == "/submit"
    assert request.query == {"x": "1"}
    assert request.fields == {"name": "Luigi", "email": ""}


def test_bad_content_length_reads_nothing():
    request = build_request({"REQUEST_METHOD": "POST", "CONTENT_LENGTH": "abc"}, io.BytesIO(b"name=Mario"))
    assert request.fields == {}


def test_get_ignores_body():
    request = build_request({"REQUEST_METHOD": "GET", "CONTENT_LENGTH": "10"}, io.BytesIO(b"name=Mario"))
    assert request.fields == {}


def test_sink_status_without_known_phrase():
    stream = io.StringIO()
    CGIStreamSink(stream).status(599)
    assert stream.getvalue() == "Status: 599\r\n"


def test_mixed_case_content_type_is_parsed():
    body = b"name=Mario&email=mario%40example.com"
    request = build_request({
        "REQUEST_METHOD": "POST",
        "REQUEST_URI": "/submit",
        "CONTENT_TYPE": "Application/X-WWW-Form-Urlencoded; charset=UTF-8",
        "CONTENT_LENGTH": str(len(body)),
    }, io.BytesIO(body))

    assert request.fields == {"name": "Mario", "email": "mario@example.com"}


def test_empty_content_type_treated_as_urlencoded():
    body = b"name=Mario"
    request = build_request({"REQUEST_METHOD": "POST", "CONTENT_TYPE": "", "CONTENT_LENGTH": str(len(body))}, io.BytesIO(body))
    assert request.fields == {"name": "Mario"}


def test_other_content_types_read_nothing():
    body = b'{"name": "Mario"}'
    request = build_request({"REQUEST_METHOD": "POST", "CONTENT_TYPE": "application/json", "CONTENT_LENGTH": str(len(body))}, io.BytesIO(body))
    assert request.fields == {}
