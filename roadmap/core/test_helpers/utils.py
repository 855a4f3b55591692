# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""utility functions for unit and integration testing"""

from django.contrib.messages import get_messages


def login_and_get_page(client, user, page):
    """force login and return get response for page"""
    client.force_login(user, backend="django.contrib.auth.backends.ModelBackend")
    return client.get(page)


def login_and_post_page(client, user, page, data):
    """force login and return post response for page"""
    client.force_login(user, backend="django.contrib.auth.backends.ModelBackend")
    return client.post(page, data)


def get_message_strings(response):
    """Return the flash messages attached to the response's request."""
    return [str(message) for message in get_messages(response.wsgi_request)]


def test_logged_out_redirect_to_login(test_case, page):
    """
    Confirm that attempting to access page while not logged in triggers a 302
    redirect to a login page.

    Parameters
    ----------
    test_case : must have client.
    page : str
        must begin with a slash.
    """
    # log out, in case already logged in
    test_case.client.logout()
    response = test_case.client.get(page)
    test_case.assertRedirects(response, f"/user/login?next={page}", fetch_redirect_response=False)


def test_user_cannot_access(test_case, user, page):
    """Confirm that accessing the page as the designated user returns a 403 response code.

    Parameters
    ----------
    test_case : django.test.TestCase.
        must have "client" attr set.
    user : user object
    page : str
        must begin with a slash.
    """
    response = login_and_get_page(test_case.client, user, page)
    test_case.assertEqual(response.status_code, 403)


def test_user_can_access(test_case, user, page):
    """Confirm that accessing the page as the designated user returns a 200 response code.

    Parameters
    ----------
    test_case : django.test.TestCase.
        must have "client" attr set.
    user : user object
    page : str
        must begin with a slash.
    """
    response = login_and_get_page(test_case.client, user, page)
    test_case.assertEqual(response.status_code, 200)
