import pytest


class TestRenderUserData:

    def test_script_steps_in_order(self):
        """Packages, clone, npm install, uploads dir, pm2, reboot persistence"""
        from converter_infra.bootstrap import render_user_data

        script = render_user_data('https://example.com/app.git')
        lines = script.splitlines()

        assert lines[0] == '#!/bin/bash'
        steps = [
            'sudo apt-get update -y',
            'sudo apt-get install -y git nodejs npm ffmpeg',
            'git clone https://example.com/app.git /home/ubuntu/app',
            'cd /home/ubuntu/app',
            'npm install',
            'mkdir -p uploads',
            'sudo chown ubuntu:ubuntu uploads',
            'sudo npm install pm2 -g',
            'pm2 start server.js --name video-converter',
            'pm2 startup systemd -u ubuntu --hp /home/ubuntu',
            'pm2 save',
        ]
        positions = [lines.index(step) for step in steps]
        assert positions == sorted(positions)

    def test_repo_url_is_shell_quoted(self):
        from converter_infra.bootstrap import render_user_data

        script = render_user_data('https://example.com/app.git; rm -rf /')

        assert "git clone 'https://example.com/app.git; rm -rf /' /home/ubuntu/app" in script

    def test_custom_entrypoint(self):
        from converter_infra.bootstrap import render_user_data

        script = render_user_data('https://example.com/app.git', entrypoint='index.js', process_name='converter')

        assert 'pm2 start index.js --name converter' in script

    @pytest.mark.parametrize('url', ['', '   '])
    def test_empty_url_rejected(self, url):
        from converter_infra.bootstrap import render_user_data

        with pytest.raises(ValueError):
            render_user_data(url)
