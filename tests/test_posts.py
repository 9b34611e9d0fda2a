from blognova.extensions import db
from blognova.models import Post


def get_post(app, post_id):
    with app.app_context():
        post = db.session.get(Post, post_id)
        return (post.title, post.content) if post else None


def test_index_lists_posts_newest_first(client, make_user, make_post):
    uid = make_user('alice')
    make_post(uid, title='Older')
    make_post(uid, title='Newer')

    body = client.get('/posts').get_data(as_text=True)
    assert body.index('Newer') < body.index('Older')
    assert 'by alice' in body


def test_new_post_requires_login(client):
    r = client.get('/posts/new')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']

    r = client.get('/posts/new', follow_redirects=True)
    assert 'You must be logged in to do that' in r.get_data(as_text=True)


def test_create_post(app, client, make_user, login):
    make_user('alice')
    login()

    r = client.post('/posts', data={'title': 'Hello', 'content': 'First words'}, follow_redirects=True)
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'New post created!' in body
    assert 'First words' in body
    with app.app_context():
        assert Post.query.count() == 1


def test_create_post_rejects_missing_fields(app, client, make_user, login):
    make_user('alice')
    login()

    r = client.post('/posts', data={'title': '', 'content': 'x'})
    assert r.status_code == 400
    assert 'Send valid data for post' in r.get_data(as_text=True)
    with app.app_context():
        assert Post.query.count() == 0


def test_show_missing_post_redirects_with_flash(client):
    r = client.get('/posts/42', follow_redirects=True)
    assert r.status_code == 200
    assert 'Post you requested does not exist!' in r.get_data(as_text=True)


def test_author_can_update_via_method_override(app, client, make_user, make_post, login):
    uid = make_user('alice')
    pid = make_post(uid)
    login()

    r = client.post(f'/posts/{pid}?_method=PUT', data={'title': 'Edited', 'content': 'New body'},
                    follow_redirects=True)
    assert 'Post updated!' in r.get_data(as_text=True)
    assert get_post(app, pid) == ('Edited', 'New body')


def test_non_author_cannot_edit_or_delete(app, client, make_user, make_post, login):
    owner = make_user('alice')
    make_user('mallory', 'pw')
    pid = make_post(owner)
    login('mallory', 'pw')

    r = client.get(f'/posts/{pid}/edit', follow_redirects=True)
    assert 'You are not the author of this post' in r.get_data(as_text=True)

    client.put(f'/posts/{pid}', data={'title': 'Hacked', 'content': 'x'})
    client.delete(f'/posts/{pid}')
    assert get_post(app, pid) == ('First post', 'Hello world')


def test_author_can_delete(app, client, make_user, make_post, login):
    uid = make_user('alice')
    pid = make_post(uid)
    login()

    r = client.post(f'/posts/{pid}?_method=DELETE', follow_redirects=True)
    assert 'Post deleted!' in r.get_data(as_text=True)
    assert get_post(app, pid) is None


def test_edit_form_prefilled(client, make_user, make_post, login):
    uid = make_user('alice')
    pid = make_post(uid, title='Draft title')
    login()

    body = client.get(f'/posts/{pid}/edit').get_data(as_text=True)
    assert 'value="Draft title"' in body
    assert '?_method=PUT' in body
